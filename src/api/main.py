"""
FastAPI application for the relevant words API.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_config
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the pipeline config on startup."""
    app.state.config = build_config()
    yield


app = FastAPI(
    title="Relevant Words API",
    description="Ranked keyphrase candidates for content analysis",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
