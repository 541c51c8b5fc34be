"""
Shared state for the API (set up in lifespan).
"""

from __future__ import annotations

from fastapi import Request

from src.relevance import RelevanceConfig, load_config


def build_config() -> RelevanceConfig:
    """Load the pipeline config from the environment."""
    return load_config()


def get_config(request: Request) -> RelevanceConfig:
    config = getattr(request.app.state, "config", None)
    if config is None:
        config = build_config()
        request.app.state.config = config
    return config
