"""JSON payload parsing and serialization for the dashboard API.

Decimals travel as strings in both directions so no precision is lost to
JSON floats. Parsing failures raise MalformedRequest.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from dutch_auction.exceptions import MalformedRequest
from dutch_auction.models import Auction, AuctionSpec, BidQuote, FeeTier, ValidationError

_MISSING = object()


def _require(data: dict[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedRequest(f"Missing field: {key}")
    return value


def parse_decimal(data: dict[str, Any], key: str) -> Decimal:
    """Read a required Decimal field (number or numeric string)."""
    value = _require(data, key)
    if isinstance(value, bool):
        raise MalformedRequest(f"Field {key} must be a number")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise MalformedRequest(f"Field {key} must be a number") from None
    if not amount.is_finite():
        raise MalformedRequest(f"Field {key} must be a finite number")
    return amount


def parse_int(data: dict[str, Any], key: str) -> int:
    """Read a required integer field."""
    value = _require(data, key)
    if isinstance(value, bool):
        raise MalformedRequest(f"Field {key} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise MalformedRequest(f"Field {key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise MalformedRequest(f"Field {key} must be an integer") from None


def parse_timestamp(data: dict[str, Any], key: str, default: float) -> float:
    """Read an optional Unix timestamp in seconds, falling back to ``default``."""
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise MalformedRequest(f"Field {key} must be a timestamp")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise MalformedRequest(f"Field {key} must be a timestamp") from None
    if not math.isfinite(seconds):
        raise MalformedRequest(f"Field {key} must be a timestamp")
    # Whole seconds stay int so derived Decimals render without a ".0"
    return int(seconds) if seconds.is_integer() else seconds


def parse_spec(data: dict[str, Any]) -> AuctionSpec:
    """Build an AuctionSpec from the creation form payload."""
    return AuctionSpec(
        start_price=parse_decimal(data, "start_price"),
        floor_price=parse_decimal(data, "floor_price"),
        decay_per_second=parse_decimal(data, "decay_per_second"),
        duration_seconds=parse_int(data, "duration_seconds"),
        token0=str(data.get("token0") or ""),
        token1=str(data.get("token1") or ""),
        fee=parse_int(data, "fee") if "fee" in data else FeeTier.BPS_30.value,
    )


def parse_auction(data: Any) -> Auction:
    """Build an Auction from a record previously returned by the API."""
    if not isinstance(data, dict):
        raise MalformedRequest("Field auction must be an object")

    fee = parse_int(data, "fee_tier") if "fee_tier" in data else FeeTier.BPS_30.value
    try:
        fee_tier = FeeTier(fee)
    except ValueError:
        raise MalformedRequest(f"Unknown fee tier: {fee}") from None

    if data.get("start_time") is None or data.get("end_time") is None:
        raise MalformedRequest("Auction requires start_time and end_time")
    start_time = parse_timestamp(data, "start_time", default=0.0)
    end_time = parse_timestamp(data, "end_time", default=0.0)
    if end_time <= start_time:
        raise MalformedRequest("Auction end_time must be after start_time")

    start_price = parse_decimal(data, "start_price")
    floor_price = parse_decimal(data, "floor_price")
    decay_per_second = parse_decimal(data, "decay_per_second")
    # Records that break these would put the curve outside [floor, start]
    if start_price <= floor_price:
        raise MalformedRequest("Auction start_price must be greater than floor_price")
    if decay_per_second < Decimal("0"):
        raise MalformedRequest("Auction decay_per_second must not be negative")

    return Auction(
        start_price=start_price,
        floor_price=floor_price,
        decay_per_second=decay_per_second,
        start_time=start_time,
        end_time=end_time,
        active=bool(data.get("active", True)),
        token0=str(data.get("token0") or ""),
        token1=str(data.get("token1") or ""),
        fee_tier=fee_tier,
        auction_id=str(data.get("auction_id") or ""),
    )


def auction_to_dict(auction: Auction) -> dict[str, Any]:
    return {
        "auction_id": auction.auction_id,
        "token0": auction.token0,
        "token1": auction.token1,
        "fee_tier": auction.fee_tier.value,
        "fee_label": auction.fee_tier.label,
        "start_price": str(auction.start_price),
        "floor_price": str(auction.floor_price),
        "decay_per_second": str(auction.decay_per_second),
        "start_time": auction.start_time,
        "end_time": auction.end_time,
        "active": auction.active,
    }


def error_to_dict(error: ValidationError) -> dict[str, Any]:
    return {
        "rule": error.rule.value,
        "field": error.field,
        "value": error.value,
        "bound": error.bound,
        "message": error.message,
    }


def quote_to_dict(quote: BidQuote) -> dict[str, Any]:
    return {
        "outcome": quote.outcome.value,
        "accepted": quote.accepted,
        "bid_amount": None if quote.bid_amount is None else str(quote.bid_amount),
        "current_price": None if quote.current_price is None else str(quote.current_price),
        "shortfall": str(quote.shortfall),
    }
