import os
from typing import Optional

import httpx

from sitebot.config import LLM


class LLMError(RuntimeError):
    pass


class LLMWrapper:
    """Client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = LLM["model"],
        base_url: str = LLM["base_url"],
        timeout: float = LLM["timeout"],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else os.getenv("OPENAI_API_KEY")
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def generate(self, system_prompt: str, user_message: str) -> str:
        """Send one system + user exchange and return the assistant reply."""
        if not self.api_key:
            raise LLMError("OPENAI_API_KEY environment variable is not set")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
        }
        url = f"{self.base_url}/chat/completions"
        print(f"[LLM] POST {url} model={self.model}", flush=True)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            raise LLMError(f"LLM request failed: {type(e).__name__}: {e}") from e

        if response.status_code != 200:
            raise LLMError(f"LLM API error {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError("LLM API returned invalid JSON") from e
        if not isinstance(data, dict):
            raise LLMError("LLM API returned an unexpected payload")

        choices = data.get("choices")
        if not choices:
            return "(no reply)"
        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise LLMError("LLM API returned an unexpected payload")
        message = choices[0].get("message") or {}
        if not isinstance(message, dict):
            raise LLMError("LLM API returned an unexpected payload")
        content = message.get("content")
        if content is not None and not isinstance(content, str):
            raise LLMError("LLM API returned an unexpected payload")
        return content or "(no reply)"
