"""
Text generation passthrough.

Prompts are forwarded to the Gemini ``generateContent`` REST endpoint.
Generation is optional: when no API key is configured, or the call
fails for any reason (including a malformed completion payload),
``generate`` returns a fixed human-readable fallback string instead of
raising.  The API answers with that string as a normal successful
response.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

NOT_CONFIGURED_TEXT = "AI service not configured."
FAILED_TEXT = "Failed to generate AI content."


class ContentGenerator:
    """Async Gemini client with degrade-to-placeholder semantics."""

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        timeout: float = 30,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        if not self.configured:
            return NOT_CONFIGURED_TEXT
        try:
            response = await self._client.post(
                f"{GEMINI_API_URL}/{self.model}:generateContent",
                params={"key": self.api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            return self._extract_text(response.json())
        except Exception:
            logger.exception("AI generation error")
            return FAILED_TEXT

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @staticmethod
    def _extract_text(data: dict) -> str:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise ValueError("Empty completion")
        return text
