from sitebot.routers.chat import router as chat_router
from sitebot.routers.crawl import router as crawl_router
from sitebot.routers.handoff import router as handoff_router

__all__ = ["chat_router", "crawl_router", "handoff_router"]
