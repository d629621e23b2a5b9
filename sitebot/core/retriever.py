import re
from dataclasses import dataclass
from typing import List, Optional

from sitebot.config import RETRIEVAL
from sitebot.core.knowledge_store import KnowledgeStore


@dataclass(frozen=True)
class ScoredChunk:
    url: str
    text: str
    score: int


def query_terms(query: str, min_length: int = RETRIEVAL["min_term_length"]) -> List[str]:
    """Lower-cased query terms, split on non-word characters, short terms dropped."""
    return [t for t in re.split(r"\W+", query.lower()) if len(t) >= min_length]


def score_chunk(query: str, chunk: str, min_length: int = RETRIEVAL["min_term_length"]) -> int:
    """Sum of whole-word occurrence counts of every query term in chunk."""
    text = chunk.lower()
    score = 0
    for term in query_terms(query, min_length):
        score += len(re.findall(r"\b" + re.escape(term) + r"\b", text))
    return score


class Retriever:
    def __init__(
        self,
        store: KnowledgeStore,
        top_k: int = RETRIEVAL["top_k"],
        max_context_chars: int = RETRIEVAL["max_context_chars"],
        min_term_length: int = RETRIEVAL["min_term_length"],
    ):
        self.store = store
        self.top_k = top_k
        self.max_context_chars = max_context_chars
        self.min_term_length = min_term_length

    def search(self, query: str, k: Optional[int] = None) -> List[ScoredChunk]:
        """Rank every chunk of the current snapshot against query.

        Ties keep snapshot order (document, then chunk) since the sort is
        stable. Only positive scores are returned, at most k of them.
        """
        k = max(k if k is not None else self.top_k, 1)
        scored = [
            ScoredChunk(url=url, text=chunk, score=score_chunk(query, chunk, self.min_term_length))
            for url, chunk in self.store.iter_chunks()
        ]
        scored.sort(key=lambda r: r.score, reverse=True)
        return [r for r in scored if r.score > 0][:k]

    def build_context(self, results: List[ScoredChunk]) -> str:
        """Concatenate ranked chunks, each under a source line, within the char budget.

        The budget covers the whole string, source lines included. A chunk
        that does not fit is cut to the remaining budget and assembly stops.
        """
        parts: List[str] = []
        used = 0
        for r in results:
            sep = "\n\n" if parts else ""
            header = f"[Source] {r.url}\n"
            remain = self.max_context_chars - used - len(sep) - len(header)
            if remain <= 0:
                break
            cut = r.text[:remain]
            block = sep + header + cut
            parts.append(block)
            used += len(block)
            if len(cut) < len(r.text):
                break
        return "".join(parts).strip()

    def retrieve_context(self, query: str, k: Optional[int] = None) -> str:
        results = self.search(query, k)
        print(f"[Retriever] {len(results)} chunks matched query ({len(self.store)} pages indexed)", flush=True)
        return self.build_context(results)
