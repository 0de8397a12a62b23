"""
Dependency injection for the market bounded context.

Wires the CoinGecko tiers and the static snapshot into the price
use case. The price cache is module-level so it outlives a request.
"""

from app.application.market.get_market_overview import GetMarketOverviewUseCase
from app.core.config import settings
from app.infrastructure.market.coingecko_adapter import CoinGeckoMarketDataAdapter
from app.infrastructure.market.static_snapshot_adapter import (
    StaticMarketDataAdapter,
)
from app.shared.cache import TTLCache

price_cache = TTLCache()


def get_market_overview_use_case() -> GetMarketOverviewUseCase:
    """Build GetMarketOverviewUseCase with its provider tiers."""
    providers = []
    if settings.coingecko_api_key:
        providers.append(
            CoinGeckoMarketDataAdapter(
                api_key=settings.coingecko_api_key,
                timeout_seconds=settings.coingecko_timeout_seconds,
            )
        )
    providers.append(
        CoinGeckoMarketDataAdapter(timeout_seconds=settings.coingecko_timeout_seconds)
    )

    return GetMarketOverviewUseCase(
        providers=providers,
        fallback=StaticMarketDataAdapter(),
        cache=price_cache,
        coin_ids=settings.price_coin_ids,
        live_ttl_seconds=settings.price_cache_ttl_seconds,
        fallback_ttl_seconds=settings.price_fallback_ttl_seconds,
    )
