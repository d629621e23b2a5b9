from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Document:
    url: str
    text: str               # normalized page text
    chunks: Tuple[str, ...]  # contiguous slices of text, in order


class BaseIngester(ABC):
    @abstractmethod
    async def ingest(self, source: Optional[str] = None) -> List[Document]:
        """Ingest a source and return the documents built from it."""
        pass
