from typing import Any, Protocol


class GenerationError(RuntimeError):
    code = "generation_failed"
    status_code = 500

    def __init__(self, message: str, *, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(GenerationError):
    code = "not_configured"


class UpstreamError(GenerationError):
    code = "upstream_failed"


class TextGenerator(Protocol):
    model: str

    async def generate(self, prompt: str) -> str: ...
