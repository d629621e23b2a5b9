from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional, Tuple

from sitebot.ingestion.base import Document


@dataclass(frozen=True)
class KnowledgeSnapshot:
    documents: Tuple[Document, ...] = ()
    built_at: Optional[str] = None  # ISO-8601 UTC, None until the first crawl

    def __len__(self) -> int:
        return len(self.documents)


class KnowledgeStore:
    """Holds the current snapshot of indexed pages.

    A crawl builds a complete new snapshot and installs it with a single
    assignment in replace(). Readers that grabbed the previous snapshot keep
    a consistent view of it.
    """

    def __init__(self):
        self._snapshot = KnowledgeSnapshot()

    @property
    def snapshot(self) -> KnowledgeSnapshot:
        return self._snapshot

    def replace(self, documents: Iterable[Document]) -> KnowledgeSnapshot:
        snapshot = KnowledgeSnapshot(
            documents=tuple(documents),
            built_at=datetime.now(timezone.utc).isoformat(),
        )
        self._snapshot = snapshot
        return snapshot

    def iter_chunks(self) -> Iterator[Tuple[str, str]]:
        """Yield (url, chunk) for every chunk of the current snapshot."""
        for doc in self._snapshot.documents:
            for chunk in doc.chunks:
                yield doc.url, chunk

    def __len__(self) -> int:
        return len(self._snapshot)
