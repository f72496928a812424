from jobgpt.ai.config import AIConfig, load_ai_config
from jobgpt.ai.types import ConfigurationError, TextGenerator

from jobgpt.ai.providers.gemini_provider import GeminiProvider
from jobgpt.ai.providers.openai_provider import OpenAIProvider


def build_text_client(cfg: AIConfig) -> TextGenerator:
    if cfg.provider == "gemini":
        return GeminiProvider(
            api_key=cfg.api_key,
            model=cfg.model,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
        )

    if cfg.provider == "openai":
        return OpenAIProvider(
            api_key=cfg.api_key,
            model=cfg.model,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
        )

    raise ConfigurationError(f"Unsupported AI_PROVIDER='{cfg.provider}'")


def get_text_client() -> TextGenerator:
    return build_text_client(load_ai_config())
