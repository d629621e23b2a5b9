import re
from typing import List, Optional, Tuple
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

from sitebot.config import SITE

_HREF_RE = re.compile(r"""href\s*=\s*(?:"([^"]+)"|'([^']+)'|([^\s>]+))""", re.I)

_SKIP_SCHEMES = ("mailto:", "tel:", "javascript:")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _origin(url: str) -> Optional[Tuple[str, str, Optional[int]]]:
    """(scheme, host, port) of an absolute URL, or None if it has no host."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return None
    scheme = parts.scheme.lower()
    port = parts.port or _DEFAULT_PORTS.get(scheme)
    return scheme, parts.hostname.lower(), port


def normalize_url(url: str, site_domain: str = SITE["domain"]) -> str:
    """Resolve url against the site domain and drop its fragment.

    Raises ValueError for URLs urllib cannot parse.
    """
    absolute, _ = urldefrag(urljoin(site_domain + "/", url.strip()))
    parts = urlsplit(absolute)
    if parts.netloc and not parts.path:
        absolute = urlunsplit((parts.scheme, parts.netloc, "/", parts.query, ""))
    return absolute


def same_origin(url: str, site_domain: str = SITE["domain"]) -> bool:
    try:
        origin = _origin(url)
        return origin is not None and origin == _origin(site_domain)
    except ValueError:
        return False


def extract_links(base_url: str, html: str, site_domain: str = SITE["domain"]) -> List[str]:
    """Collect same-origin absolute links from the href attributes in html.

    Links are resolved against base_url and returned without fragments and
    without duplicates. Malformed URLs are dropped.
    """
    found: List[str] = []
    seen = set()
    for m in _HREF_RE.finditer(html):
        raw = (m.group(1) or m.group(2) or m.group(3) or "").strip()
        if not raw or raw.lower().startswith(_SKIP_SCHEMES):
            continue
        try:
            absolute = normalize_url(urljoin(base_url, raw), site_domain)
        except ValueError:
            continue
        if absolute in seen or not same_origin(absolute, site_domain):
            continue
        seen.add(absolute)
        found.append(absolute)
    return found
