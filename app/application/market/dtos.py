"""
Data Transfer Objects for the market application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CoinDisplay:
    """Pre-formatted strings for one price table row."""

    price: str
    change_1h: str
    change_24h: str
    change_7d: str
    market_cap: str
    volume: str


@dataclass(frozen=True)
class CoinResult:
    """Output DTO for one coin in the price table.

    Attributes:
        id: Provider coin identifier (e.g. ``solana``).
        is_up: Whether the 24h change is zero or positive.
        sparkline_points: SVG polyline points, None without a series.
    """

    id: str
    symbol: str
    name: str
    image: str
    current_price: Optional[float]
    price_change_percentage_1h: Optional[float]
    price_change_percentage_24h: Optional[float]
    price_change_percentage_7d: Optional[float]
    market_cap: Optional[float]
    total_volume: Optional[float]
    sparkline: list[float]
    sparkline_points: Optional[str]
    is_up: bool
    display: CoinDisplay


@dataclass(frozen=True)
class GlobalResult:
    """Output DTO for aggregate market totals."""

    total_market_cap_usd: Optional[float]
    total_volume_usd: Optional[float]
    btc_dominance: Optional[float]
    market_cap_change_percentage_24h: Optional[float]
    display_market_cap: str
    display_volume: str
    display_change_24h: str


@dataclass(frozen=True)
class MarketOverviewResult:
    """Output DTO for the price table.

    Attributes:
        source: Tier that served the data (authenticated/public/static).
        is_mock: True when the static snapshot was used.
    """

    source: str
    is_mock: bool
    fetched_at: datetime
    coins: list[CoinResult]
    global_data: Optional[GlobalResult]
