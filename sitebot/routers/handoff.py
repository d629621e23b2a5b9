from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from sitebot.core.handoff import HandoffError, HandoffNotifier
from sitebot.deps import get_notifier

router = APIRouter(tags=["handoff"])


class HandoffRequest(BaseModel):
    name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    summary: Optional[str] = ""


class HandoffResponse(BaseModel):
    ok: bool
    message: Optional[str] = None


@router.post("/handoff", response_model=HandoffResponse, response_model_exclude_none=True)
async def handoff(
    request: Optional[HandoffRequest] = None,
    notifier: HandoffNotifier = Depends(get_notifier),
):
    """Escalate the conversation to a human through the support webhook."""
    request = request or HandoffRequest()
    if not notifier.is_configured():
        return HandoffResponse(ok=True, message="No webhook configured")
    try:
        await notifier.notify(
            name=request.name or "",
            email=request.email or "",
            phone=request.phone or "",
            summary=request.summary or "",
        )
    except HandoffError as e:
        print(f"[Handoff] {e}", flush=True)
        raise HTTPException(status_code=500, detail="Handoff failed")
    return HandoffResponse(ok=True)
