"""Bid evaluation against the current auction price.

A bid is checked in this order:
  1. amount must be a finite, positive number  -> REJECTED_INVALID_AMOUNT
  2. auction must be active and not past end   -> REJECTED_AUCTION_INACTIVE
  3. amount >= current_price(auction, now)     -> ACCEPTED, else REJECTED_TOO_LOW

Acceptance depends only on the price comparison. Final settlement of the
encrypted bid belongs to the hook contract, not to this module.
"""

import math
from decimal import Decimal, InvalidOperation

from dutch_auction.auction.curve import current_price
from dutch_auction.logging import get_logger
from dutch_auction.models import Auction, BidOutcome, BidQuote

logger = get_logger(__name__)


def parse_amount(value: object) -> Decimal | None:
    """Convert a raw bid amount to Decimal.

    Accepts Decimal, int, float and numeric strings. Returns None for anything
    that is not a finite number (bool, NaN, Infinity, garbage text).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        amount = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite():
        return None
    return amount


def quote_bid(auction: Auction, bid_amount: object, now: float) -> BidQuote:
    """Evaluate a bid and report the price it was compared against.

    Args:
        auction: Target auction.
        bid_amount: Raw bid amount in the quote token.
        now: Caller-supplied Unix timestamp in seconds.

    Returns:
        BidQuote with outcome, parsed amount, current price and shortfall.
    """
    amount = parse_amount(bid_amount)
    if amount is None or amount <= Decimal("0"):
        return BidQuote(
            outcome=BidOutcome.REJECTED_INVALID_AMOUNT,
            bid_amount=amount,
            current_price=None,
        )

    if not auction.active or now >= auction.end_time:
        return BidQuote(
            outcome=BidOutcome.REJECTED_AUCTION_INACTIVE,
            bid_amount=amount,
            current_price=None,
        )

    price = current_price(auction, now)
    if amount >= price:
        quote = BidQuote(
            outcome=BidOutcome.ACCEPTED,
            bid_amount=amount,
            current_price=price,
        )
    else:
        quote = BidQuote(
            outcome=BidOutcome.REJECTED_TOO_LOW,
            bid_amount=amount,
            current_price=price,
            shortfall=price - amount,
        )

    logger.debug(
        "bid_evaluated",
        auction_id=auction.auction_id,
        outcome=quote.outcome.value,
        bid_amount=str(amount),
        current_price=str(price),
    )
    return quote


def evaluate_bid(auction: Auction, bid_amount: object, now: float) -> BidOutcome:
    """Decide whether a bid would be accepted at time ``now``.

    Deterministic: identical inputs always give the identical outcome.
    """
    return quote_bid(auction, bid_amount, now).outcome
