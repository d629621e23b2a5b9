from fastapi import Request

from sitebot.core.crawl_service import CrawlService
from sitebot.core.handoff import HandoffNotifier
from sitebot.core.knowledge_store import KnowledgeStore
from sitebot.core.llm import LLMWrapper
from sitebot.core.retriever import Retriever

# FastAPI dependencies: components are built once in create_app() and kept on app.state


def get_store(request: Request) -> KnowledgeStore:
    return request.app.state.store


def get_retriever(request: Request) -> Retriever:
    return request.app.state.retriever


def get_llm(request: Request) -> LLMWrapper:
    return request.app.state.llm


def get_crawl_service(request: Request) -> CrawlService:
    return request.app.state.crawl_service


def get_notifier(request: Request) -> HandoffNotifier:
    return request.app.state.notifier


def get_site(request: Request) -> dict:
    return request.app.state.site
