import re
from typing import List

from sitebot.config import CHUNKING

# An unterminated block runs to the end of the document
_SCRIPT_RE = re.compile(r"<script\b[^>]*>.*?(?:</script\s*>|\Z)", re.S | re.I)
_STYLE_RE = re.compile(r"<style\b[^>]*>.*?(?:</style\s*>|\Z)", re.S | re.I)
_TAG_RE = re.compile(r"<[^>]+>")

_ENTITIES = [
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]


def strip_html(html: str) -> str:
    """Convert raw page markup to a single line of plain text.

    Script and style blocks are dropped with their content, every other tag
    is replaced by a space, and whitespace runs collapse to one space.
    """
    text = _SCRIPT_RE.sub(" ", str(html))
    text = _STYLE_RE.sub(" ", text)
    text = _TAG_RE.sub(" ", text)
    for entity, repl in _ENTITIES:
        text = text.replace(entity, repl)
    text = re.sub(r"&#\d+;", " ", text)
    text = re.sub(r"&(?!amp;)[a-z]+;", " ", text, flags=re.I)
    # &amp; last so "&amp;lt;" stays a literal "&lt;"
    text = re.sub(r"&amp;", "&", text, flags=re.I)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def chunk_text(text: str, max_len: int = CHUNKING["size"]) -> List[str]:
    """Split text into consecutive, non-overlapping slices of at most max_len chars."""
    if max_len <= 0:
        raise ValueError("max_len must be positive")
    return [text[i:i + max_len] for i in range(0, len(text), max_len)]
