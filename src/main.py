from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.router import router
from src.config import settings
from src.core.exceptions import register_exception_handlers
from src.core.logging import configure_logging
from src.schemas.documents import OUTCOME_HEADER
from src.services import docs_export

configure_logging(settings.log_level, debug=settings.debug)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("app_starting", app=settings.app_name)
    yield
    await docs_export.close_client()
    logger.info("app_stopped", app=settings.app_name)


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=[OUTCOME_HEADER],
)
register_exception_handlers(app)
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=settings.host, port=settings.port, log_level=settings.log_level)
