"""
OpenRouter chat-completions client.
"""

from __future__ import annotations

from typing import Optional

import httpx

from bounty_agent.base_agent import (
    DEFAULT_MODEL,
    LLM_MAX_TOKENS,
    LLM_TEMPERATURE,
    OPENROUTER_API,
    raise_for_api_status,
)

APP_REFERER = "https://github.com/madisoncarter1234/bounty-openrouter"
APP_TITLE = "Bounty Hunter Agent"


class OpenRouterClient:
    """Minimal OpenRouter client: one POST per chat, no retries."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        url: str = OPENROUTER_API,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("OpenRouter API key not configured")
        self.api_key = api_key
        self.model = model
        self.url = url
        self.http = httpx.Client(timeout=120.0, transport=transport)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": APP_REFERER,
            "X-Title": APP_TITLE,
        }

    def chat(self, messages: list[dict]) -> str:
        """Send role-tagged messages and return the first choice's content."""
        resp = self.http.post(
            self.url,
            headers=self._headers(),
            json={
                "model": self.model,
                "messages": messages,
                "temperature": LLM_TEMPERATURE,
                "max_tokens": LLM_MAX_TOKENS,
            },
        )
        raise_for_api_status(resp, "OpenRouter API")

        data = resp.json()
        choices = data.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        content = message.get("content")
        return content if isinstance(content, str) else ""

    def close(self):
        self.http.close()
