"""
Adapter: Static market snapshot.

Implements MarketDataProvider port with hardcoded numbers.
This is the last tier: it never fails and is flagged as mock data.
"""

from app.domain.market.entities import CoinData, GlobalData, PriceSource
from app.domain.market.ports import MarketDataProvider

STATIC_COINS: tuple[CoinData, ...] = (
    CoinData(
        id="solana",
        symbol="sol",
        name="Solana",
        current_price=148.52,
        price_change_percentage_24h=3.24,
        market_cap=72_400_000_000,
        total_volume=3_200_000_000,
    ),
    CoinData(
        id="bitcoin",
        symbol="btc",
        name="Bitcoin",
        current_price=97_350.0,
        price_change_percentage_24h=-1.12,
        market_cap=1_920_000_000_000,
        total_volume=28_500_000_000,
    ),
    CoinData(
        id="ethereum",
        symbol="eth",
        name="Ethereum",
        current_price=2_685.4,
        price_change_percentage_24h=0.87,
        market_cap=323_000_000_000,
        total_volume=12_100_000_000,
    ),
)

STATIC_GLOBAL = GlobalData(
    total_market_cap_usd=3_350_000_000_000,
    total_volume_usd=118_000_000_000,
    btc_dominance=57.4,
    market_cap_change_percentage_24h=-0.42,
)


class StaticMarketDataAdapter(MarketDataProvider):
    """Serves the hardcoded snapshot for the tracked coins."""

    source = PriceSource.STATIC

    def fetch_markets(self, coin_ids: list[str]) -> list[CoinData]:
        """Return the static rows whose id is tracked, in snapshot order."""
        wanted = set(coin_ids)
        return [coin for coin in STATIC_COINS if coin.id in wanted]

    def fetch_global(self) -> GlobalData:
        """Return the static global totals."""
        return STATIC_GLOBAL
