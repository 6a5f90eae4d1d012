"""FastAPI application entry point."""
from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordquiz.api import quiz, scores, words
from wordquiz.api.errors import invalid_input_handler
from wordquiz.core import config
from wordquiz.core.logging_config import setup_logging
from wordquiz.domain.common.errors import InvalidInput
from wordquiz.persistence.db import init_db

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title="Word Quiz API",
    description="Vocabulary quiz backend with weighted word selection",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(InvalidInput, invalid_input_handler)


# ------------------------------------------------------------------
# Startup: logging + DB schema
# ------------------------------------------------------------------
@app.on_event("startup")
def on_startup():
    setup_logging(config.LOG_LEVEL)
    init_db()
    logger.info("Word Quiz API started")


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(words.router)
app.include_router(quiz.router)
app.include_router(scores.router)
