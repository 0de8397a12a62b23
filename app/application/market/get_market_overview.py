"""
Use case: Build the live price table.

Input: none (tracked coin ids come from configuration)
Output: MarketOverviewResult
Side effects: Calls external market-data tiers, fills the process cache.
Failure cases: None. Every provider failure degrades to the next tier,
the last tier being the static snapshot.
"""

import logging

from app.application.market.dtos import (
    CoinDisplay,
    CoinResult,
    GlobalResult,
    MarketOverviewResult,
)
from app.domain.market.entities import (
    CoinData,
    GlobalData,
    MarketSnapshot,
    PriceSource,
)
from app.domain.market.errors import MarketDataUnavailableError
from app.domain.market.formatting import (
    format_compact,
    format_percent,
    format_usd,
    sparkline_points,
)
from app.domain.market.ports import MarketDataProvider
from app.shared.cache import TTLCache

logger = logging.getLogger(__name__)

CACHE_KEY = "market_overview"


class GetMarketOverviewUseCase:
    """Orchestrates the tier fallback for market data.

    Live providers are tried in the order given. When all of them
    fail, the static fallback provider is used and flagged as mock data.
    Snapshots are cached, with a separate lifetime for static data.
    """

    def __init__(
        self,
        providers: list[MarketDataProvider],
        fallback: MarketDataProvider,
        cache: TTLCache,
        coin_ids: list[str],
        live_ttl_seconds: int = 60,
        fallback_ttl_seconds: int = 120,
    ) -> None:
        self._providers = providers
        self._fallback = fallback
        self._cache = cache
        self._coin_ids = coin_ids
        self._live_ttl_seconds = live_ttl_seconds
        self._fallback_ttl_seconds = fallback_ttl_seconds

    def execute(self) -> MarketOverviewResult:
        """Run the price table use case.

        Returns:
            Coins, global totals and the tier that served them.
        """
        snapshot = self.get_snapshot()
        return MarketOverviewResult(
            source=snapshot.source.value,
            is_mock=snapshot.is_mock,
            fetched_at=snapshot.fetched_at,
            coins=[_to_coin_result(coin) for coin in snapshot.coins],
            global_data=(
                _to_global_result(snapshot.global_data)
                if snapshot.global_data is not None
                else None
            ),
        )

    def get_snapshot(self) -> MarketSnapshot:
        """Return the cached snapshot or fetch a new one through the tiers."""
        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return cached

        snapshot = self._fetch_through_tiers()
        ttl = (
            self._fallback_ttl_seconds
            if snapshot.is_mock
            else self._live_ttl_seconds
        )
        self._cache.set(CACHE_KEY, snapshot, ttl)
        return snapshot

    def _fetch_through_tiers(self) -> MarketSnapshot:
        for provider in self._providers:
            try:
                coins = provider.fetch_markets(self._coin_ids)
            except MarketDataUnavailableError as exc:
                logger.warning(
                    "Price tier %s failed: %s", provider.source.value, exc.reason
                )
                continue

            logger.info(
                "Fetched %d coins from %s tier", len(coins), provider.source.value
            )
            return MarketSnapshot(
                coins=tuple(coins),
                source=provider.source,
                global_data=self._fetch_global(provider),
            )

        logger.warning("All live price tiers failed, serving static snapshot")
        return MarketSnapshot(
            coins=tuple(self._fallback.fetch_markets(self._coin_ids)),
            source=PriceSource.STATIC,
            global_data=self._fallback.fetch_global(),
        )

    @staticmethod
    def _fetch_global(provider: MarketDataProvider) -> GlobalData | None:
        # Global totals are optional; the coin table decides the tier.
        try:
            return provider.fetch_global()
        except MarketDataUnavailableError as exc:
            logger.warning(
                "Global market data unavailable from %s: %s",
                provider.source.value,
                exc.reason,
            )
            return None


def _to_coin_result(coin: CoinData) -> CoinResult:
    return CoinResult(
        id=coin.id,
        symbol=coin.symbol,
        name=coin.name,
        image=coin.image,
        current_price=coin.current_price,
        price_change_percentage_1h=coin.price_change_percentage_1h,
        price_change_percentage_24h=coin.price_change_percentage_24h,
        price_change_percentage_7d=coin.price_change_percentage_7d,
        market_cap=coin.market_cap,
        total_volume=coin.total_volume,
        sparkline=list(coin.sparkline),
        sparkline_points=sparkline_points(coin.sparkline),
        is_up=coin.is_up,
        display=CoinDisplay(
            price=format_usd(coin.current_price),
            change_1h=format_percent(coin.price_change_percentage_1h),
            change_24h=format_percent(coin.price_change_percentage_24h),
            change_7d=format_percent(coin.price_change_percentage_7d),
            market_cap=format_compact(coin.market_cap),
            volume=format_compact(coin.total_volume),
        ),
    )


def _to_global_result(data: GlobalData) -> GlobalResult:
    return GlobalResult(
        total_market_cap_usd=data.total_market_cap_usd,
        total_volume_usd=data.total_volume_usd,
        btc_dominance=data.btc_dominance,
        market_cap_change_percentage_24h=data.market_cap_change_percentage_24h,
        display_market_cap=format_compact(data.total_market_cap_usd),
        display_volume=format_compact(data.total_volume_usd),
        display_change_24h=format_percent(data.market_cap_change_percentage_24h),
    )
