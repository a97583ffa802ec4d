from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config.app_config import get_data_dir, get_log_level, get_server_address
from init_db import init_database
from api import items
from utils.logging_utils import set_logging_context, clear_logging_context
import logging
from logging.handlers import RotatingFileHandler
import os
import sys


def configure_logging():
    """
    Install rotating file and console handlers on the root logger.

    Safe to call more than once; handlers are only added the first time
    for a given log file.

    Returns:
        Path of the log file
    """
    log_dir = get_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "backend.log"
    level = get_log_level()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return log_file

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)

    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    return log_file


LOG_FILE = configure_logging()
logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    init_database()
    logger.info("CourseHub API started")
    yield
    logger.info("CourseHub API stopped")


app = FastAPI(
    title="CourseHub API",
    description="Posts, links, classes, comments and ratings with per-user vote state",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get('COURSEHUB_CORS_ORIGINS', '*').split(','),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_context_middleware(request: Request, call_next):
    """Tag every log line emitted while serving a request with its path."""
    set_logging_context(request_path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_logging_context()


app.include_router(items.router, prefix="/api", tags=["items"])


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    host, port = get_server_address()
    uvicorn.run(app, host=host, port=port)
