"""Dutch auction pricing core.

Provides parameter validation, the linear decay price curve, bid
evaluation and auction lifecycle helpers. Every function takes the caller's
clock reading explicitly and keeps no state between calls.
"""

from dutch_auction.auction.bids import evaluate_bid, parse_amount, quote_bid
from dutch_auction.auction.curve import (
    current_price,
    floor_reached_at,
    projected_end_price,
    time_remaining,
)
from dutch_auction.auction.lifecycle import auction_status, close_auction, open_auction
from dutch_auction.auction.validator import SpecValidator

__all__ = [
    "SpecValidator",
    "auction_status",
    "close_auction",
    "current_price",
    "evaluate_bid",
    "floor_reached_at",
    "open_auction",
    "parse_amount",
    "projected_end_price",
    "quote_bid",
    "time_remaining",
]
