import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from jobgpt.ai.types import GenerationError

logger = logging.getLogger(__name__)


async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    logger.error("generation_failed code=%s path=%s: %s", exc.code, request.url.path, exc)
    content: dict = {"error": str(exc)}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)
