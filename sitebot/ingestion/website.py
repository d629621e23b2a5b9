"""
Website Ingester
================
Crawls a single company site breadth-first and turns every HTML page into a
Document for the in-memory knowledge store.

Strategy:
1. Seed a FIFO queue with the normalized start URL
2. Fetch pages one at a time (browser-like User-Agent, redirects followed)
3. Skip anything that is not a successful text/html response
4. Strip markup, chunk the text, and queue unseen same-site links
5. Stop when the queue drains or the page budget is reached

A failure on one URL is logged and skipped; the crawl never retries. URLs
outside the configured site, the start URL included, are never indexed.
"""

from collections import deque
from typing import Deque, List, Optional, Set
from urllib.parse import urlsplit

import httpx

from sitebot.config import CHUNKING, CRAWL, SITE
from sitebot.ingestion.base import BaseIngester, Document
from sitebot.ingestion.links import extract_links, normalize_url, same_origin
from sitebot.ingestion.text import chunk_text, strip_html

# Links to these never return HTML worth indexing, so they are not queued
SKIP_EXTENSIONS = {
    ".pdf", ".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp",
    ".mp4", ".mp3", ".wav", ".zip", ".tar", ".gz", ".exe", ".dmg",
    ".css", ".js", ".mjs", ".woff", ".woff2", ".ttf", ".otf", ".ico",
    ".xml", ".json", ".yaml", ".yml",
}


class WebsiteIngester(BaseIngester):
    """Breadth-first, same-site crawler bounded by a page budget."""

    def __init__(
        self,
        site_domain: str = SITE["domain"],
        max_pages: int = CRAWL["max_pages"],
        chunk_size: int = CHUNKING["size"],
        request_timeout: float = CRAWL["request_timeout"],
        user_agent: str = CRAWL["user_agent"],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.site_domain = site_domain.rstrip("/")
        self.max_pages = max_pages
        self.chunk_size = chunk_size
        self.request_timeout = request_timeout
        self.user_agent = user_agent
        self._transport = transport

    async def ingest(self, source: Optional[str] = None) -> List[Document]:
        start = normalize_url(source or self.site_domain, self.site_domain)
        queue: Deque[str] = deque([start])
        seen: Set[str] = set()
        pages: List[Document] = []

        print(f"[Crawler] Starting crawl: {start} (max {self.max_pages} pages)", flush=True)

        async with httpx.AsyncClient(
            timeout=self.request_timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        ) as client:
            while queue and len(pages) < self.max_pages:
                url = queue.popleft()
                if url in seen:
                    continue
                seen.add(url)
                if not same_origin(url, self.site_domain):
                    print(f"[Crawler] x skip (off-site): {url}", flush=True)
                    continue
                try:
                    doc, links = await self._crawl_one(client, url)
                except Exception as e:
                    print(f"[Crawler] x skip: {url} {str(e)[:120]}", flush=True)
                    continue
                if doc is None:
                    continue
                pages.append(doc)
                for link in links:
                    if link not in seen and self._should_queue(link):
                        queue.append(link)
                print(f"[Crawler] • indexed: {url}", flush=True)

        print(f"[Crawler] Done! Pages indexed: {len(pages)} | URLs visited: {len(seen)}", flush=True)
        return pages

    async def _crawl_one(self, client: httpx.AsyncClient, url: str):
        resp = await client.get(url)
        if not resp.is_success:
            print(f"[Crawler] x HTTP {resp.status_code}: {url}", flush=True)
            return None, []
        if not same_origin(str(resp.url), self.site_domain):
            print(f"[Crawler] x SKIP (redirected off-site to {resp.url}): {url}", flush=True)
            return None, []
        ct = resp.headers.get("content-type", "").lower()
        if "text/html" not in ct:
            print(f"[Crawler] x SKIP (non-HTML content-type: {ct}): {url}", flush=True)
            return None, []
        html = resp.text
        text = strip_html(html)
        doc = Document(url=url, text=text, chunks=tuple(chunk_text(text, self.chunk_size)))
        # resolve relative links against the final URL after redirects
        return doc, extract_links(str(resp.url), html, self.site_domain)

    def _should_queue(self, link: str) -> bool:
        if not link.startswith(self.site_domain):
            return False
        path_lower = urlsplit(link).path.lower()
        return not any(path_lower.endswith(ext) for ext in SKIP_EXTENSIONS)
