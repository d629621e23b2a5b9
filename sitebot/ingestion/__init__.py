from sitebot.ingestion.base import BaseIngester, Document
from sitebot.ingestion.links import extract_links, normalize_url, same_origin
from sitebot.ingestion.text import chunk_text, strip_html
from sitebot.ingestion.website import WebsiteIngester

__all__ = [
    "BaseIngester",
    "Document",
    "WebsiteIngester",
    "chunk_text",
    "extract_links",
    "normalize_url",
    "same_origin",
    "strip_html",
]
