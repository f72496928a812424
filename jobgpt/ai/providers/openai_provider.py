from __future__ import annotations

import logging

from openai import APIError, AsyncOpenAI

from jobgpt.ai.types import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class OpenAIProvider:
    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        timeout_s: float = 30.0,
        temperature: float = 0.2,
    ):
        self.model = model
        self._api_key = (api_key or "").strip()
        self._base_url = base_url
        self._timeout_s = timeout_s
        self._temperature = temperature

    async def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise ConfigurationError("OpenAI API key not configured")

        client = AsyncOpenAI(
            api_key=self._api_key,
            base_url=self._base_url or None,
            timeout=self._timeout_s,
            max_retries=0,
        )
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
        except APIError as exc:
            logger.warning("openai_request_failed model=%s: %s", self.model, exc)
            raise UpstreamError("Generative model request failed") from exc
        finally:
            await client.close()

        content = response.choices[0].message.content if response.choices else None
        if content is None:
            raise UpstreamError("Generative model returned an unexpected response")
        return content
