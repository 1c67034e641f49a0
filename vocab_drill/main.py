import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from vocab_drill.config import get_settings, validate_settings
from vocab_drill.logger import setup_logging
from vocab_drill.routes.page import STATIC_DIR
from vocab_drill.routes.page import router as page_router
from vocab_drill.routes.sessions import router as sessions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = validate_settings()
    setup_logging(settings)
    logger.info(
        "Vocabulary drill ready (max sessions %d, max upload %d bytes)",
        settings.max_sessions,
        settings.max_upload_bytes,
    )
    yield
    logger.info("Vocabulary drill shutting down")


app = FastAPI(title="Vocabulary Drill", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(page_router)
app.include_router(sessions_router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
