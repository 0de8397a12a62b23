"""
Domain entities for the market bounded context.

Snapshots are immutable per fetch and never persisted.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class PriceSource(Enum):
    """Tier that produced a market snapshot, best first."""

    AUTHENTICATED = "authenticated"
    PUBLIC = "public"
    STATIC = "static"


@dataclass(frozen=True)
class CoinData:
    """Market data for a single coin as reported by the provider."""

    id: str
    symbol: str
    name: str
    current_price: Optional[float]
    price_change_percentage_1h: Optional[float] = None
    price_change_percentage_24h: Optional[float] = None
    price_change_percentage_7d: Optional[float] = None
    market_cap: Optional[float] = None
    total_volume: Optional[float] = None
    image: str = ""
    sparkline: tuple[float, ...] = ()

    @property
    def is_up(self) -> bool:
        """True when the 24h change is zero or positive."""
        return (self.price_change_percentage_24h or 0.0) >= 0


@dataclass(frozen=True)
class GlobalData:
    """Aggregate totals across the whole crypto market."""

    total_market_cap_usd: Optional[float]
    total_volume_usd: Optional[float]
    btc_dominance: Optional[float]
    market_cap_change_percentage_24h: Optional[float]


@dataclass(frozen=True)
class MarketSnapshot:
    """The price table payload produced by one pass through the tiers."""

    coins: tuple[CoinData, ...]
    source: PriceSource
    global_data: Optional[GlobalData] = None
    fetched_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_mock(self) -> bool:
        """True when the data comes from the hardcoded static snapshot."""
        return self.source is PriceSource.STATIC
