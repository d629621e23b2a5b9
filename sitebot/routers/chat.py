from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from sitebot.core.llm import LLMError, LLMWrapper
from sitebot.core.retriever import Retriever
from sitebot.deps import get_llm, get_retriever, get_site

router = APIRouter(tags=["chat"])

NO_CONTEXT = "(No site context available. Keep answers general and suggest a human for specifics.)"


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str


def build_system_prompt(context: str, company_name: str, company_topic: str) -> str:
    """System prompt: company voice ("we / our"), grounding rules, then the retrieved context."""
    return "\n".join([
        f"You are the website assistant for {company_name}.",
        'Always answer in first person plural ("we / our") when referring to the company.',
        f"Answer using the context below and general knowledge about {company_topic}.",
        "If a detail is missing, say you are not certain and offer to connect a human.",
        "Context:",
        context or NO_CONTEXT,
    ])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    retriever: Retriever = Depends(get_retriever),
    llm: LLMWrapper = Depends(get_llm),
    site: dict = Depends(get_site),
):
    """Answer a visitor question using the crawled site as context."""
    message = (request.message or "").strip()
    if not message:
        raise HTTPException(status_code=400, detail="No message")

    context = retriever.retrieve_context(message)
    print(f"[Chat] Context built, length={len(context)} chars", flush=True)
    system_prompt = build_system_prompt(context, site["company_name"], site["company_topic"])

    try:
        reply = await llm.generate(system_prompt, message)
    except LLMError as e:
        print(f"[Chat] LLM failure: {e}", flush=True)
        raise HTTPException(status_code=500, detail="Chat failed")
    return ChatResponse(reply=reply)
