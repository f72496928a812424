from __future__ import annotations

import logging
from typing import Any

import httpx

from jobgpt.ai.types import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiProvider:
    """Single-shot client for the Generative Language ``generateContent`` call."""

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = "gemini-1.5-flash",
        base_url: str | None = None,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = (api_key or "").strip()
        self.model = model
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout_s = timeout_s
        self._transport = transport

    def _endpoint(self) -> str:
        return f"{self._base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise ConfigurationError("Gemini API key not configured")

        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                response = await client.post(
                    self._endpoint(),
                    params={"key": self._api_key},
                    json=payload,
                )
        except httpx.HTTPError as exc:
            logger.warning("gemini_transport_failed model=%s: %s", self.model, exc)
            raise UpstreamError("Failed to reach the generative model") from exc

        if not response.is_success:
            logger.warning(
                "gemini_request_failed model=%s status=%s body=%s",
                self.model,
                response.status_code,
                response.text[:300],
            )
            raise UpstreamError(
                "Generative model request failed",
                details={"status": response.status_code},
            )

        try:
            data: Any = response.json()
            return str(data["candidates"][0]["content"]["parts"][0]["text"])
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.warning("gemini_response_malformed model=%s: %s", self.model, exc)
            raise UpstreamError("Generative model returned an unexpected response") from exc
