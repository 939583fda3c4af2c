"""Custom exceptions for the Dutch auction pricing service.

The pricing core reports problems as values (ValidationError, BidOutcome).
These exceptions exist for callers that prefer raising at their boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dutch_auction.models import ValidationError


class AuctionError(Exception):
    """Base exception for all auction errors."""


class InvalidAuctionSpec(AuctionError):
    """Raised when a proposed auction fails parameter validation."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error


class AuctionNotOpen(AuctionError):
    """Raised when an operation requires an active auction."""


class MalformedRequest(AuctionError):
    """Raised when a request payload cannot be parsed into domain types."""
