"""Shared test fixtures for the Dutch auction pricing service."""

from decimal import Decimal

import pytest

from dutch_auction.auction.validator import SpecValidator
from dutch_auction.config import AppSettings, AuctionBounds
from dutch_auction.models import Auction, AuctionSpec, FeeTier


@pytest.fixture
def bounds() -> AuctionBounds:
    """Default bounds: prices 1-1,000,000, decay 0-10,000/s, 5 min to 24 h."""
    return AuctionBounds()


@pytest.fixture
def validator(bounds: AuctionBounds) -> SpecValidator:
    return SpecValidator(bounds)


@pytest.fixture
def valid_spec() -> AuctionSpec:
    """The creation form defaults: 1000 -> 100 at 10/s over one hour."""
    return AuctionSpec(
        start_price=Decimal("1000"),
        floor_price=Decimal("100"),
        decay_per_second=Decimal("10"),
        duration_seconds=3600,
        token0="WETH",
        token1="USDC",
        fee=3000,
    )


@pytest.fixture
def auction() -> Auction:
    """Active auction starting at t=0: 1000 -> 100 at 10/s, ends at t=3600."""
    return Auction(
        start_price=Decimal("1000"),
        floor_price=Decimal("100"),
        decay_per_second=Decimal("10"),
        start_time=0,
        end_time=3600,
        active=True,
        token0="WETH",
        token1="USDC",
        fee_tier=FeeTier.BPS_30,
        auction_id="0xpool",
    )


@pytest.fixture
def app_settings() -> AppSettings:
    """AppSettings with test defaults and no .env lookup."""
    return AppSettings(
        _env_file=None,  # type: ignore[call-arg]
        log_level="DEBUG",
        auction=AuctionBounds(),
    )
