"""
Table Cache Copilot Extension
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import chat, cors, greeting, health
from config import Settings, settings
from core.cache_knowledge_base import CacheKnowledgeBase
from core.chat_pipeline import ChatPipeline

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("copilot_extension")

ENDPOINTS = (
    ("GET ", "/greeting", "Get greeting message"),
    ("POST", "/v1/chat/completions", "Chat completions for Copilot"),
    ("GET ", "/health", "Health check"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Table cache extension starting up on port %d…", app.state.settings.PORT)
    logger.info("Endpoints available:")
    for method, path, description in ENDPOINTS:
        logger.info("  %s %s - %s", method, path, description)
    yield
    logger.info("Table cache extension shutting down.")


def create_app(
    app_settings: Optional[Settings] = None,
    knowledge_base: Optional[CacheKnowledgeBase] = None,
) -> FastAPI:
    app_settings = app_settings or settings

    # ── App ───────────────────────────────────────────────────────────────────
    app = FastAPI(
        title="Table Cache Copilot Extension",
        description="Answers table cache questions over the chat-completion protocol.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.chat_pipeline = ChatPipeline(knowledge_base or CacheKnowledgeBase())

    # ── CORS ──────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=cors.ALLOW_METHODS,
        allow_headers=cors.ALLOW_HEADERS,
    )

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(greeting.router)
    app.include_router(chat.router)
    app.include_router(health.router)
    app.include_router(cors.router)
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
