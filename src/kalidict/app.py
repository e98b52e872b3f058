import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import init_db
from .globals import vocab_loader
from .log_handler import SQLiteHandler
from .router import router

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("kalidict")
    logger.setLevel(logging.INFO)
    # Handlers are attached once per process.
    if logger.handlers:
        return

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    if settings.LOG_TO_DB:
        db_handler = SQLiteHandler()
        db_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(db_handler)
    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_ON_STARTUP:
        vocab_loader.seed()
    yield


# --- App Factory ---
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )

    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

    app.include_router(router)

    index_path = os.path.join(settings.STATIC_DIR, "index.html")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_app(full_path: str):
        if full_path.startswith("api/"):
            return JSONResponse({"error": "Not found"}, status_code=404)
        return FileResponse(index_path)

    return app
