"""FastAPI dashboard application factory."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from dutch_auction.auction.validator import SpecValidator
from dutch_auction.config import AppSettings
from dutch_auction.dashboard.routes import api


def create_dashboard_app(
    settings: AppSettings | None = None,
    lifespan: Any = None,
) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        settings: Application settings. Loaded from the environment when None.
        lifespan: Optional async context manager for application lifespan events.

    Returns:
        Configured FastAPI application with the JSON API mounted at /api.
    """
    settings = settings or AppSettings()

    app = FastAPI(
        title="Encrypted Dutch Auction Dashboard",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.validator = SpecValidator(settings.auction)

    app.include_router(api.router, prefix="/api")

    return app
