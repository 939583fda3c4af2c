"""Auction record creation, closing and dashboard status.

In production the hook contract owns the auction record and flips it
inactive on settlement; these helpers build the same record locally so the
dashboard and tests can drive the curve without a chain.
"""

import dataclasses
from decimal import Decimal

from dutch_auction.exceptions import AuctionNotOpen
from dutch_auction.logging import get_logger
from dutch_auction.models import Auction, AuctionStatus, ValidatedSpec

logger = get_logger(__name__)


def open_auction(
    validated: ValidatedSpec,
    start_time: float,
    auction_id: str = "",
) -> Auction:
    """Create a time-stamped auction from a validated spec.

    Args:
        validated: Output of SpecValidator.validate().
        start_time: Unix timestamp in seconds at which decay begins.
        auction_id: Optional pool address or other handle.

    Returns:
        Active Auction with end_time = start_time + duration_seconds.
    """
    spec = validated.spec
    auction = Auction(
        start_price=spec.start_price,
        floor_price=spec.floor_price,
        decay_per_second=spec.decay_per_second,
        start_time=start_time,
        end_time=start_time + spec.duration_seconds,
        active=True,
        token0=spec.token0.strip(),
        token1=spec.token1.strip(),
        fee_tier=validated.fee_tier,
        auction_id=auction_id,
    )

    logger.info(
        "auction_opened",
        auction_id=auction_id,
        pair=f"{auction.token0}/{auction.token1}",
        fee_tier=auction.fee_tier.value,
        start_price=str(auction.start_price),
        floor_price=str(auction.floor_price),
        decay_per_second=str(auction.decay_per_second),
        start_time=start_time,
        end_time=auction.end_time,
    )
    return auction


def close_auction(auction: Auction) -> Auction:
    """Return an inactive copy of ``auction``.

    Raises:
        AuctionNotOpen: If the auction is already inactive.
    """
    if not auction.active:
        raise AuctionNotOpen(f"Auction {auction.auction_id or '<unnamed>'} is not active")

    logger.info("auction_closed", auction_id=auction.auction_id)
    return dataclasses.replace(auction, active=False)


def auction_status(auction: Auction | None, now: float) -> AuctionStatus:
    """Classify an auction for display.

    Precedence: missing -> NO_AUCTION, inactive -> ENDED, past end_time but
    not yet settled -> EXPIRED, otherwise ACTIVE.
    """
    if auction is None:
        return AuctionStatus.NO_AUCTION
    if not auction.active:
        return AuctionStatus.ENDED
    if Decimal(str(now)) >= Decimal(str(auction.end_time)):
        return AuctionStatus.EXPIRED
    return AuctionStatus.ACTIVE
