"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

#: Fee tiers in internal units (hundredths of a basis point): 1, 5, 10, 30, 100 bps.
DEFAULT_FEE_TIERS: list[int] = [100, 500, 1000, 3000, 10000]


class AuctionBounds(BaseSettings):
    """Parameter bounds enforced when a new auction is proposed.

    Prices and decay are quoted in the quote token (e.g. USDC), durations
    in seconds. All fields configurable via AUCTION_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="AUCTION_")

    min_start_price: Decimal = Decimal("1")
    max_start_price: Decimal = Decimal("1000000")
    min_floor_price: Decimal = Decimal("1")
    max_floor_price: Decimal = Decimal("1000000")
    min_decay_rate: Decimal = Decimal("0")  # zero decay = fixed-price auction
    max_decay_rate: Decimal = Decimal("10000")  # per second
    min_auction_duration: int = 300  # 5 minutes
    max_auction_duration: int = 86400  # 24 hours
    allowed_fee_tiers: list[int] = list(DEFAULT_FEE_TIERS)

    @model_validator(mode="after")
    def check_ranges(self) -> "AuctionBounds":
        """Each range must be ordered; decay must not go negative."""
        if self.min_decay_rate < Decimal("0"):
            raise ValueError(f"min_decay_rate {self.min_decay_rate} must not be negative")
        ranges = [
            ("start_price", self.min_start_price, self.max_start_price),
            ("floor_price", self.min_floor_price, self.max_floor_price),
            ("decay_rate", self.min_decay_rate, self.max_decay_rate),
            ("auction_duration", self.min_auction_duration, self.max_auction_duration),
        ]
        for name, low, high in ranges:
            if low > high:
                raise ValueError(f"min_{name} {low} must not exceed max_{name} {high}")
        return self


class GatewaySettings(BaseSettings):
    """FHE gateway and hook contract endpoints.

    Only surfaced to clients; nothing in this package talks to the gateway.
    """

    model_config = SettingsConfigDict(env_prefix="GATEWAY_")

    network_name: str = "local"
    fhe_gateway_url: str = "http://localhost:4000"
    contract_address: str = "0x0000000000000000000000000000000000000000"

    @property
    def is_testnet(self) -> bool:
        return self.network_name.lower() == "sepolia"


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080
    enabled: bool = True
    polling_interval: int = 10  # seconds between client price refreshes


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    auction: AuctionBounds = AuctionBounds()
    gateway: GatewaySettings = GatewaySettings()
    dashboard: DashboardSettings = DashboardSettings()
