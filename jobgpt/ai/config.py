import os
from dataclasses import dataclass

DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    timeout_s: float


def _timeout() -> float:
    raw = (os.getenv("AI_TIMEOUT_S") or "").strip()
    try:
        return float(raw) if raw else 30.0
    except ValueError:
        return 30.0


def load_ai_config() -> AIConfig:
    """Resolve the generative-text settings from the process environment.

    Called per request so that credentials are never frozen at import time.
    """
    provider = (os.getenv("AI_PROVIDER") or "gemini").strip().lower()
    model = (os.getenv("AI_MODEL") or DEFAULT_MODELS.get(provider, "")).strip()

    if provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("OPENAI_BASE_URL")
    else:
        api_key = os.getenv("GEMINI_API_KEY")
        base_url = os.getenv("GEMINI_BASE_URL")

    return AIConfig(
        provider=provider,
        model=model,
        api_key=(api_key or "").strip() or None,
        base_url=(base_url or "").strip() or None,
        timeout_s=_timeout(),
    )
