from fastapi import FastAPI
from pydantic import ValidationError
from hello_web.config import Settings, get_settings
from hello_web.home import router as home_router
from hello_web.logging_config import setup_logging
from contextlib import asynccontextmanager
import logging
import uvicorn

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{settings.app_name} starting")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(home_router)
    return app


def run(settings: Settings | None = None) -> None:
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise

    setup_logging(settings.log_level)
    app = create_app(settings)
    logger.info(f"Serving {settings.app_name} on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
