"""Auction parameter validation against configured bounds.

Checks run in a fixed order and stop at the first violation:
  1. start price range
  2. floor price range
  3. start price strictly above floor price
  4. decay rate range
  5. duration range
  6. token pair non-empty and distinct
  7. fee in the allowed tier set

The result is either a ValidatedSpec or a ValidationError naming the field
and bound, never an exception. Use require() to raise instead.
"""

from decimal import Decimal

from dutch_auction.config import AuctionBounds
from dutch_auction.exceptions import InvalidAuctionSpec
from dutch_auction.logging import get_logger
from dutch_auction.models import (
    AuctionSpec,
    FeeTier,
    ValidatedSpec,
    ValidationError,
    ValidationRule,
)

logger = get_logger(__name__)


def _in_range(value: Decimal, low: Decimal, high: Decimal) -> bool:
    # NaN/Infinity would raise InvalidOperation on comparison
    if not value.is_finite():
        return False
    return low <= value <= high


def _range_error(
    rule: ValidationRule,
    field: str,
    label: str,
    value: object,
    low: object,
    high: object,
) -> ValidationError:
    return ValidationError(
        rule=rule,
        field=field,
        value=str(value),
        bound=f"[{low}, {high}]",
        message=f"{label} must be between {low} and {high}",
    )


class SpecValidator:
    """Validates proposed auctions against AuctionBounds.

    Args:
        bounds: Configured parameter bounds and allowed fee tiers.
    """

    def __init__(self, bounds: AuctionBounds) -> None:
        self._bounds = bounds

    def validate(self, spec: AuctionSpec) -> ValidatedSpec | ValidationError:
        """Validate an auction spec, failing fast on the first violated rule.

        Args:
            spec: Proposed auction parameters.

        Returns:
            ValidatedSpec when every rule holds, otherwise the ValidationError
            for the first rule that failed.
        """
        error = self._first_violation(spec)
        if error is not None:
            logger.info(
                "auction_spec_rejected",
                rule=error.rule.value,
                field=error.field,
                value=error.value,
                bound=error.bound,
            )
            return error

        return ValidatedSpec(spec=spec, fee_tier=FeeTier(spec.fee))

    def require(self, spec: AuctionSpec) -> ValidatedSpec:
        """Like validate(), but raise InvalidAuctionSpec on failure."""
        result = self.validate(spec)
        if isinstance(result, ValidationError):
            raise InvalidAuctionSpec(result)
        return result

    def _first_violation(self, spec: AuctionSpec) -> ValidationError | None:
        b = self._bounds

        if not _in_range(spec.start_price, b.min_start_price, b.max_start_price):
            return _range_error(
                ValidationRule.START_PRICE_RANGE,
                "start_price",
                "Start price",
                spec.start_price,
                b.min_start_price,
                b.max_start_price,
            )

        if not _in_range(spec.floor_price, b.min_floor_price, b.max_floor_price):
            return _range_error(
                ValidationRule.FLOOR_PRICE_RANGE,
                "floor_price",
                "Floor price",
                spec.floor_price,
                b.min_floor_price,
                b.max_floor_price,
            )

        if spec.start_price <= spec.floor_price:
            return ValidationError(
                rule=ValidationRule.START_NOT_ABOVE_FLOOR,
                field="start_price",
                value=str(spec.start_price),
                bound=f"> {spec.floor_price}",
                message="Start price must be greater than floor price",
            )

        if not _in_range(spec.decay_per_second, b.min_decay_rate, b.max_decay_rate):
            return _range_error(
                ValidationRule.DECAY_RATE_RANGE,
                "decay_per_second",
                "Decay rate",
                spec.decay_per_second,
                b.min_decay_rate,
                b.max_decay_rate,
            )

        if not (
            b.min_auction_duration <= spec.duration_seconds <= b.max_auction_duration
        ):
            return _range_error(
                ValidationRule.DURATION_RANGE,
                "duration_seconds",
                "Duration (seconds)",
                spec.duration_seconds,
                b.min_auction_duration,
                b.max_auction_duration,
            )

        token0 = spec.token0.strip()
        token1 = spec.token1.strip()
        if not token0 or not token1:
            return ValidationError(
                rule=ValidationRule.TOKEN_PAIR,
                field="token0" if not token0 else "token1",
                value=spec.token0 if not token0 else spec.token1,
                bound="non-empty",
                message="Both tokens of the pair are required",
            )
        # Addresses are hex, so compare case-insensitively
        if token0.lower() == token1.lower():
            return ValidationError(
                rule=ValidationRule.TOKEN_PAIR,
                field="token1",
                value=spec.token1,
                bound=f"!= {spec.token0}",
                message="Token pair must contain two different tokens",
            )

        allowed = sorted(set(b.allowed_fee_tiers) & {t.value for t in FeeTier})
        if spec.fee not in allowed:
            return ValidationError(
                rule=ValidationRule.FEE_TIER,
                field="fee",
                value=str(spec.fee),
                bound=str(allowed),
                message=f"Fee must be one of {allowed}",
            )

        return None
