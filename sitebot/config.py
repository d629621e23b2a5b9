import os

from dotenv import load_dotenv

# Load environment variables before the constants below read them
load_dotenv()


def _env_flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off", "")


SITE = {
    "domain": (os.getenv("COMPANY_DOMAIN") or "https://www.example.com").rstrip("/"),
    "company_name": os.getenv("COMPANY_NAME", "our company"),
    "company_topic": os.getenv("COMPANY_TOPIC", "our products and services"),
}

CRAWL = {
    "max_pages": int(os.getenv("CRAWL_MAX_PAGES", 12)),
    "interval_s": 24 * 60 * 60,
    "request_timeout": 20.0,
    "user_agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/127 Safari/537.36"
    ),
    "on_startup": _env_flag("CRAWL_ON_STARTUP"),
}

CHUNKING = {
    "size": 900,  # chars
}

RETRIEVAL = {
    "top_k": 6,
    "max_context_chars": 6000,
    "min_term_length": 3,
}

LLM = {
    "model": os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
    "base_url": os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
    "timeout": 60.0,
}

HANDOFF = {
    "webhook_url": os.getenv("SUPPORT_WEBHOOK_URL") or None,
    "timeout": 10.0,
}

SERVER = {
    "port": int(os.getenv("PORT", 3000)),
}
