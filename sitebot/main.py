import asyncio
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from sitebot.config import CRAWL, SERVER, SITE
from sitebot.core.crawl_service import CrawlService
from sitebot.core.handoff import HandoffNotifier
from sitebot.core.knowledge_store import KnowledgeStore
from sitebot.core.llm import LLMWrapper
from sitebot.core.retriever import Retriever
from sitebot.ingestion.base import BaseIngester
from sitebot.ingestion.website import WebsiteIngester
from sitebot.routers import chat_router, crawl_router, handoff_router


def create_app(
    site: Optional[dict] = None,
    ingester: Optional[BaseIngester] = None,
    llm: Optional[LLMWrapper] = None,
    notifier: Optional[HandoffNotifier] = None,
    schedule_crawls: bool = CRAWL["on_startup"],
    crawl_interval_s: float = CRAWL["interval_s"],
) -> FastAPI:
    """Build the API with its components; anything not passed in comes from config."""
    site = dict(SITE, **(site or {}))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"[DEBUG] Starting up SiteBot for {site['domain']}...", flush=True)
        task = None
        if schedule_crawls:
            # startup crawl, then every crawl_interval_s
            task = asyncio.create_task(app.state.crawl_service.run_periodically(crawl_interval_s))
        yield
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        print("[DEBUG] SiteBot shut down", flush=True)

    app = FastAPI(
        title="SiteBot API",
        description="Website chat assistant backed by a crawled keyword index",
        version="1.0.0",
        lifespan=lifespan,
    )

    store = KnowledgeStore()
    app.state.site = site
    app.state.store = store
    app.state.retriever = Retriever(store)
    app.state.llm = llm or LLMWrapper()
    app.state.notifier = notifier or HandoffNotifier()
    app.state.crawl_service = CrawlService(
        store,
        ingester or WebsiteIngester(site_domain=site["domain"]),
        site_domain=site["domain"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        print(f"[MIDDLEWARE] Incoming request: {request.method} {request.url}", flush=True, file=sys.stdout)
        response = await call_next(request)
        print(f"[MIDDLEWARE] Response status: {response.status_code}", flush=True, file=sys.stdout)
        return response

    # The widget is embedded on the company site, so any origin may call us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # must be False when allow_origins=["*"]
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(crawl_router)
    app.include_router(chat_router)
    app.include_router(handoff_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=SERVER["port"])
