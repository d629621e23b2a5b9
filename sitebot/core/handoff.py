from typing import Optional

import httpx

from sitebot.config import HANDOFF


class HandoffError(RuntimeError):
    pass


def format_handoff(name: str = "", email: str = "", phone: str = "", summary: str = "") -> str:
    lines = ["Website chat: human requested"]
    for label, value in (("Name", name), ("Email", email), ("Phone", phone), ("Summary", summary)):
        if value:
            lines.append(f"• {label}: {value}")
    return "\n".join(lines)


class HandoffNotifier:
    """Posts human-handoff requests to a chat webhook (Slack-style {"text": ...})."""

    def __init__(
        self,
        webhook_url: Optional[str] = HANDOFF["webhook_url"],
        timeout: float = HANDOFF["timeout"],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    async def notify(self, name: str = "", email: str = "", phone: str = "", summary: str = "") -> bool:
        """Send the handoff. Returns False when no webhook is configured."""
        if not self.is_configured():
            return False

        payload = {"text": format_handoff(name, email, phone, summary)}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.webhook_url, json=payload)
        except httpx.HTTPError as e:
            raise HandoffError(f"Webhook request failed: {e}") from e

        if not resp.is_success:
            raise HandoffError(f"Webhook failed with HTTP {resp.status_code}")
        print("[Handoff] Webhook notified", flush=True)
        return True
