"""Entry point for the Dutch auction dashboard service.

Loads settings, configures logging and serves the JSON API with uvicorn.
The pricing core keeps no state, so the lifespan only logs startup and
shutdown along with the bounds in force.
"""

import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from dutch_auction.config import AppSettings
from dutch_auction.dashboard.app import create_dashboard_app
from dutch_auction.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup and a marker on shutdown."""
    logger = get_logger("dutch_auction.main")
    settings: AppSettings = app.state.settings
    bounds = settings.auction

    logger.info(
        "dashboard_started",
        network=settings.gateway.network_name,
        fhe_gateway_url=settings.gateway.fhe_gateway_url,
        contract_address=settings.gateway.contract_address,
        start_price_range=f"{bounds.min_start_price}-{bounds.max_start_price}",
        floor_price_range=f"{bounds.min_floor_price}-{bounds.max_floor_price}",
        decay_rate_range=f"{bounds.min_decay_rate}-{bounds.max_decay_rate}",
        duration_range=f"{bounds.min_auction_duration}-{bounds.max_auction_duration}",
        fee_tiers=bounds.allowed_fee_tiers,
    )

    yield

    logger.info("dashboard_stopped")


async def run() -> None:
    """Run the dashboard API server.

    Exits immediately with a log line when DASHBOARD_ENABLED=false, since
    the API is the only surface this service exposes.
    """
    settings = AppSettings()

    setup_logging(settings.log_level, network=settings.gateway.network_name)
    logger = get_logger("dutch_auction.main")

    if not settings.dashboard.enabled:
        logger.warning("dashboard_disabled", note="Nothing to serve; exiting.")
        return

    app = create_dashboard_app(settings=settings, lifespan=lifespan)

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
