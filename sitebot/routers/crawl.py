from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sitebot.core.crawl_service import CrawlService
from sitebot.core.knowledge_store import KnowledgeStore
from sitebot.deps import get_crawl_service, get_store

router = APIRouter(tags=["crawl"])


class CrawlRequest(BaseModel):
    url: Optional[str] = None


class CrawlResponse(BaseModel):
    ok: bool
    pages: int
    domain: str


class KBStatusResponse(BaseModel):
    pages: int
    domain: str
    updated_at: Optional[str] = None
    crawling: bool = False


@router.post("/crawl", response_model=CrawlResponse)
async def crawl(
    request: Optional[CrawlRequest] = None,
    service: CrawlService = Depends(get_crawl_service),
):
    """Crawl the given URL (default: the configured site) and replace the knowledge store."""
    target = (request.url.strip() if request and request.url else "") or service.site_domain
    print(f"[Crawl] Manual crawl: {target}", flush=True)
    try:
        result = await service.run(target)
    except Exception as e:
        print(f"[Crawl] Manual crawl failed: {e}", flush=True)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
    print(f"[Crawl] Manual crawl pages: {result.pages}", flush=True)
    return CrawlResponse(ok=True, pages=result.pages, domain=result.domain)


@router.get("/kb-status", response_model=KBStatusResponse)
async def kb_status(
    store: KnowledgeStore = Depends(get_store),
    service: CrawlService = Depends(get_crawl_service),
):
    snapshot = store.snapshot
    return KBStatusResponse(
        pages=len(snapshot),
        domain=service.site_domain,
        updated_at=snapshot.built_at,
        crawling=service.is_running,
    )
