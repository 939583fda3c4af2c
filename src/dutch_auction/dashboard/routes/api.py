"""JSON API endpoints for the create, dashboard and bid views.

The API is stateless: clients keep the auction record returned by
POST /auctions and send it back with every status or bid request.
Optional ``now``/``start_time`` fields default to the server clock.
"""

from __future__ import annotations

import time
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from dutch_auction.auction.bids import quote_bid
from dutch_auction.auction.curve import (
    current_price,
    floor_reached_at,
    projected_end_price,
    time_remaining,
)
from dutch_auction.auction.lifecycle import auction_status, open_auction
from dutch_auction.auction.validator import SpecValidator
from dutch_auction.config import AppSettings
from dutch_auction.dashboard.formatting import format_duration, format_time_remaining
from dutch_auction.dashboard.payloads import (
    auction_to_dict,
    error_to_dict,
    parse_auction,
    parse_spec,
    parse_timestamp,
    quote_to_dict,
)
from dutch_auction.exceptions import MalformedRequest
from dutch_auction.logging import auction_context
from dutch_auction.models import FeeTier, ValidationError

log = structlog.get_logger(__name__)

router = APIRouter()


async def _read_object(request: Request) -> dict[str, Any]:
    """Decode the request body, which must be a JSON object."""
    try:
        data = await request.json()
    except ValueError:
        raise MalformedRequest("Request body must be valid JSON") from None
    if not isinstance(data, dict):
        raise MalformedRequest("Request body must be a JSON object")
    return data


def _bad_request(exc: MalformedRequest) -> JSONResponse:
    log.info("malformed_request", error=str(exc))
    return JSONResponse(status_code=400, content={"error": str(exc)})


@router.get("/config")
async def get_config(request: Request) -> JSONResponse:
    """Bounds, fee tiers and gateway info for rendering the creation form."""
    settings: AppSettings = request.app.state.settings
    bounds = settings.auction
    allowed = set(bounds.allowed_fee_tiers)

    return JSONResponse(content={
        "bounds": {
            "min_start_price": str(bounds.min_start_price),
            "max_start_price": str(bounds.max_start_price),
            "min_floor_price": str(bounds.min_floor_price),
            "max_floor_price": str(bounds.max_floor_price),
            "min_decay_rate": str(bounds.min_decay_rate),
            "max_decay_rate": str(bounds.max_decay_rate),
            "min_auction_duration": bounds.min_auction_duration,
            "max_auction_duration": bounds.max_auction_duration,
        },
        "fee_tiers": [
            {"value": tier.value, "bps": tier.bps, "label": tier.label}
            for tier in FeeTier
            if tier.value in allowed
        ],
        "gateway": {
            "network_name": settings.gateway.network_name,
            "fhe_gateway_url": settings.gateway.fhe_gateway_url,
            "contract_address": settings.gateway.contract_address,
            "is_testnet": settings.gateway.is_testnet,
        },
        "polling_interval": settings.dashboard.polling_interval,
    })


@router.post("/auctions/validate")
async def validate_auction(request: Request) -> JSONResponse:
    """Check a proposed auction without creating it."""
    validator: SpecValidator = request.app.state.validator
    try:
        spec = parse_spec(await _read_object(request))
    except MalformedRequest as e:
        return _bad_request(e)

    result = validator.validate(spec)
    if isinstance(result, ValidationError):
        return JSONResponse(content={"valid": False, "error": error_to_dict(result)})

    return JSONResponse(content={
        "valid": True,
        "error": None,
        "projected_end_price": str(projected_end_price(spec)),
        "duration": format_duration(spec.duration_seconds),
    })


@router.post("/auctions")
async def create_auction(request: Request) -> JSONResponse:
    """Validate a spec and return the time-stamped auction record."""
    validator: SpecValidator = request.app.state.validator
    try:
        data = await _read_object(request)
        spec = parse_spec(data)
        start_time = parse_timestamp(data, "start_time", default=time.time())
    except MalformedRequest as e:
        return _bad_request(e)

    result = validator.validate(spec)
    if isinstance(result, ValidationError):
        return JSONResponse(status_code=422, content={"error": error_to_dict(result)})

    auction = open_auction(
        result,
        start_time=start_time,
        auction_id=str(data.get("auction_id") or ""),
    )
    return JSONResponse(content={
        "auction": auction_to_dict(auction),
        "projected_end_price": str(projected_end_price(spec)),
    })


@router.post("/auctions/status")
async def get_auction_status(request: Request) -> JSONResponse:
    """Current price, status and countdown for an auction record."""
    try:
        data = await _read_object(request)
        auction = parse_auction(data.get("auction"))
        now = parse_timestamp(data, "now", default=time.time())
    except MalformedRequest as e:
        return _bad_request(e)

    status = auction_status(auction, now)
    remaining = time_remaining(auction, now)
    floor_at = floor_reached_at(auction)

    return JSONResponse(content={
        "status": status.value,
        "status_label": status.label,
        "current_price": str(current_price(auction, now)),
        "time_remaining": str(remaining),
        "time_remaining_label": format_time_remaining(remaining),
        "floor_reached_at": None if floor_at is None else str(floor_at),
        "now": now,
    })


@router.post("/bids/evaluate")
async def evaluate_bid(request: Request) -> JSONResponse:
    """Quote a bid against the auction's current price."""
    try:
        data = await _read_object(request)
        auction = parse_auction(data.get("auction"))
        now = parse_timestamp(data, "now", default=time.time())
    except MalformedRequest as e:
        return _bad_request(e)

    with auction_context(auction.auction_id):
        quote = quote_bid(auction, data.get("bid_amount"), now)
        log.info("bid_quoted", outcome=quote.outcome.value)
    return JSONResponse(content=quote_to_dict(quote))
