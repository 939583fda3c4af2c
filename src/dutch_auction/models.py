"""Shared data models for the Dutch auction pricing service.

CRITICAL: All prices and decay rates use Decimal. Never use float for prices.
Timestamps are Unix seconds (int or float) supplied by the caller's clock.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class FeeTier(int, Enum):
    """Pool fee tier in hundredths of a basis point (Uniswap v4 convention)."""

    BPS_1 = 100
    BPS_5 = 500
    BPS_10 = 1000
    BPS_30 = 3000
    BPS_100 = 10000

    @property
    def bps(self) -> int:
        return self.value // 100

    @property
    def percent(self) -> Decimal:
        """Fee as a percentage, e.g. Decimal("0.3") for the 30 bps tier."""
        return Decimal(self.value) / Decimal("10000")

    @property
    def label(self) -> str:
        """Display label, e.g. "0.3% (30 bps)"."""
        return f"{self.percent.normalize():f}% ({self.bps} bps)"


class ValidationRule(str, Enum):
    """Which auction parameter rule was violated."""

    START_PRICE_RANGE = "start_price_range"
    FLOOR_PRICE_RANGE = "floor_price_range"
    START_NOT_ABOVE_FLOOR = "start_not_above_floor"
    DECAY_RATE_RANGE = "decay_rate_range"
    DURATION_RANGE = "duration_range"
    TOKEN_PAIR = "token_pair"
    FEE_TIER = "fee_tier"


class BidOutcome(str, Enum):
    """Result of evaluating a bid against the price curve."""

    ACCEPTED = "accepted"
    REJECTED_TOO_LOW = "rejected_too_low"
    REJECTED_AUCTION_INACTIVE = "rejected_auction_inactive"
    REJECTED_INVALID_AMOUNT = "rejected_invalid_amount"


class AuctionStatus(str, Enum):
    """Dashboard status of the current auction."""

    NO_AUCTION = "no_auction"
    ACTIVE = "active"
    EXPIRED = "expired"  # still flagged active, but past end_time
    ENDED = "ended"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AuctionStatus.NO_AUCTION: "No Active Auction",
    AuctionStatus.ACTIVE: "Active",
    AuctionStatus.EXPIRED: "Time Expired",
    AuctionStatus.ENDED: "Auction Ended",
}


@dataclass(frozen=True)
class AuctionSpec:
    """Proposed auction parameters, as entered on the creation form."""

    start_price: Decimal
    floor_price: Decimal
    decay_per_second: Decimal
    duration_seconds: int
    token0: str
    token1: str
    fee: int = FeeTier.BPS_30.value


@dataclass(frozen=True)
class ValidatedSpec:
    """An AuctionSpec that passed every bound and cross-field check.

    Only SpecValidator constructs these.
    """

    spec: AuctionSpec
    fee_tier: FeeTier


@dataclass(frozen=True)
class ValidationError:
    """First rule an AuctionSpec violated.

    Not an exception: returned by SpecValidator.validate so callers can render
    a precise message next to the offending field.
    """

    rule: ValidationRule
    field: str
    value: str
    bound: str  # human-readable violated bound, e.g. "[1, 1000000]"
    message: str


@dataclass(frozen=True)
class Auction:
    """A created auction as read back from the hook contract."""

    start_price: Decimal
    floor_price: Decimal
    decay_per_second: Decimal
    start_time: float
    end_time: float
    active: bool = True
    token0: str = ""
    token1: str = ""
    fee_tier: FeeTier = FeeTier.BPS_30
    auction_id: str = ""  # pool address once settled on-chain


@dataclass(frozen=True)
class BidQuote:
    """Bid outcome with the price it was compared against."""

    outcome: BidOutcome
    bid_amount: Decimal | None  # None when the amount could not be parsed
    current_price: Decimal | None  # None when the auction was not evaluated
    shortfall: Decimal = Decimal("0")  # price - bid when REJECTED_TOO_LOW

    @property
    def accepted(self) -> bool:
        return self.outcome is BidOutcome.ACCEPTED
