"""Linear price decay curve for Dutch auctions.

price(now) = max(floor_price, start_price - decay_per_second * elapsed)
elapsed    = max(0, now - start_time)

The curve is clamped on both sides: it never rises above start_price (time
before start_time counts as zero elapsed) and never falls below floor_price.
Every function here takes the caller's clock reading and reads no state.

CRITICAL: All price computations use Decimal. Timestamps are converted via
str() so that float clocks do not leak binary rounding into prices.
"""

from decimal import Decimal

from dutch_auction.models import Auction, AuctionSpec


def _seconds(value: float) -> Decimal:
    return Decimal(str(value))


def current_price(auction: Auction, now: float) -> Decimal:
    """Compute the auction price at time ``now``.

    Args:
        auction: The auction whose curve to evaluate.
        now: Caller-supplied Unix timestamp in seconds.

    Returns:
        Price in [floor_price, start_price].
    """
    elapsed = max(Decimal("0"), _seconds(now) - _seconds(auction.start_time))
    raw = auction.start_price - auction.decay_per_second * elapsed
    return max(auction.floor_price, raw)


def projected_end_price(spec: AuctionSpec) -> Decimal:
    """Price the curve will show when the auction runs its full duration.

    Used as the creation-form preview:
        max(floor_price, start_price - duration_seconds * decay_per_second)
    """
    raw = spec.start_price - Decimal(spec.duration_seconds) * spec.decay_per_second
    return max(spec.floor_price, raw)


def time_remaining(auction: Auction, now: float) -> Decimal:
    """Seconds left until end_time, never negative."""
    return max(Decimal("0"), _seconds(auction.end_time) - _seconds(now))


def floor_reached_at(auction: Auction) -> Decimal | None:
    """Timestamp at which the curve first touches the floor.

    Returns None for a zero-decay auction, which holds start_price for its
    whole life. The result may lie beyond end_time.
    """
    if auction.decay_per_second <= Decimal("0"):
        return None
    span = (auction.start_price - auction.floor_price) / auction.decay_per_second
    return _seconds(auction.start_time) + span
