from sitebot.core.knowledge_store import KnowledgeStore, KnowledgeSnapshot
from sitebot.core.retriever import Retriever, ScoredChunk
from sitebot.core.llm import LLMWrapper, LLMError
from sitebot.core.crawl_service import CrawlService, CrawlResult
from sitebot.core.handoff import HandoffNotifier, HandoffError

__all__ = [
    "KnowledgeStore",
    "KnowledgeSnapshot",
    "Retriever",
    "ScoredChunk",
    "LLMWrapper",
    "LLMError",
    "CrawlService",
    "CrawlResult",
    "HandoffNotifier",
    "HandoffError",
]
