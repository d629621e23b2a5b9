import asyncio
import time
from dataclasses import dataclass
from typing import Optional

from sitebot.config import CRAWL, SITE
from sitebot.core.knowledge_store import KnowledgeStore
from sitebot.ingestion.base import BaseIngester
from sitebot.ingestion.links import normalize_url, same_origin


@dataclass(frozen=True)
class CrawlResult:
    pages: int
    domain: str
    duration_s: float


class CrawlService:
    """Single entry point for crawls, shared by the API and the daily job.

    Overlapping triggers are serialized: a crawl requested while another is
    running waits for it to finish and then runs in full.
    """

    def __init__(self, store: KnowledgeStore, ingester: BaseIngester, site_domain: str = SITE["domain"]):
        self.store = store
        self.ingester = ingester
        self.site_domain = site_domain
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def run(self, url: Optional[str] = None) -> CrawlResult:
        target = url or self.site_domain
        if not same_origin(normalize_url(target, self.site_domain), self.site_domain):
            raise ValueError(f"URL is outside {self.site_domain}: {target}")
        if self._lock.locked():
            print(f"[CrawlService] Crawl in progress, queued: {target}", flush=True)
        async with self._lock:
            started = time.monotonic()
            documents = await self.ingester.ingest(target)
            snapshot = self.store.replace(documents)
            duration = time.monotonic() - started
        print(f"[CrawlService] Pages indexed: {len(snapshot)} ({duration:.1f}s)", flush=True)
        return CrawlResult(pages=len(snapshot), domain=self.site_domain, duration_s=duration)

    async def run_periodically(self, interval_s: float = CRAWL["interval_s"]) -> None:
        """Crawl the configured site now and then every interval_s seconds until cancelled."""
        while True:
            try:
                print(f"[CrawlService] Scheduled crawl: {self.site_domain}", flush=True)
                await self.run()
            except Exception as e:
                print(f"[CrawlService] Crawl error: {e}", flush=True)
            await asyncio.sleep(interval_s)
