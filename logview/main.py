"""logview FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from logview import config
from logview.routers.transcripts import transcripts_router
from logview.observability import initialize as initialize_observability, shutdown as shutdown_observability

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("logview")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    logger.info("logview starting up")
    initialize_observability(app)
    yield
    logger.info("logview shutting down")
    shutdown_observability(app)


app = FastAPI(
    title="logview API",
    description="Decodes agent session transcripts into display blocks",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        config.FRONTEND_ORIGIN,
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcripts_router)


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "toolResultErrorMode": config.TOOL_RESULT_ERROR_MODE,
    }


def run() -> None:
    import uvicorn

    uvicorn.run("logview.main:app", host=config.HOST, port=config.PORT)
