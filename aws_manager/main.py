from contextlib import asynccontextmanager

from fastapi import FastAPI

from aws_manager.config.logger import configure_logging, get_logger
from aws_manager.config.settings import settings

from aws_manager.s3.router import router as s3_router

configure_logging(level=settings.logging.level, fmt=settings.logging.format)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s v%s", settings.title, settings.version)
    yield
    logger.info("Shutting down %s", settings.title)


app = FastAPI(
    title=settings.title,
    description=settings.description,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.get("/health", tags=["Main"])
async def root():
    return {"app": settings.title, "version": settings.version, "status": "running"}


app.include_router(s3_router, prefix="/s3", tags=["S3"])
