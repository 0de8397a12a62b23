"""
Pydantic schemas for the price table API.

These schemas define the API contract.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel


class CoinDisplayItem(BaseModel):
    """Pre-formatted values for one row of the price table."""

    price: str
    change_1h: str
    change_24h: str
    change_7d: str
    market_cap: str
    volume: str


class CoinItem(BaseModel):
    """A single coin in the price table."""

    id: str
    symbol: str
    name: str
    image: str
    current_price: float | None
    price_change_percentage_1h: float | None
    price_change_percentage_24h: float | None
    price_change_percentage_7d: float | None
    market_cap: float | None
    total_volume: float | None
    sparkline: list[float]
    sparkline_points: str | None
    is_up: bool
    display: CoinDisplayItem


class GlobalItem(BaseModel):
    """Aggregate market totals."""

    total_market_cap_usd: float | None
    total_volume_usd: float | None
    btc_dominance: float | None
    market_cap_change_percentage_24h: float | None
    display_market_cap: str
    display_volume: str
    display_change_24h: str


class MarketOverviewResponse(BaseModel):
    """Response schema for the price table endpoint.

    Attributes:
        source: Tier that served the data (authenticated, public, static).
        is_mock: True when live providers were unavailable.
    """

    source: str
    is_mock: bool
    fetched_at: datetime
    coins: list[CoinItem]
    global_data: GlobalItem | None
