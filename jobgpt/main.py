import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk

from jobgpt.api.v1.health import router as health_router
from jobgpt.api.v1.assistant import router as assistant_router
from jobgpt.api.v1.records import router as records_router
from jobgpt.ai.types import GenerationError
from jobgpt.core.config import settings
from jobgpt.core.cors import cors_allowed_headers, cors_allowed_origins
from jobgpt.core.errors import generation_error_handler
from jobgpt.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="JobGPT API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=cors_allowed_headers(),
)
app.add_exception_handler(GenerationError, generation_error_handler)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(assistant_router, prefix="/v1", tags=["Assistant"])
app.include_router(records_router, prefix="/v1", tags=["Records"])
