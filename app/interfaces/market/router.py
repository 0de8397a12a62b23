"""
FastAPI router for the market bounded context.

All routes delegate to use cases. No business logic here.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from app.application.market.get_market_overview import GetMarketOverviewUseCase
from app.interfaces.market.dependencies import get_market_overview_use_case
from app.interfaces.market.schemas import (
    CoinItem,
    GlobalItem,
    MarketOverviewResponse,
)

router = APIRouter(tags=["market"])


@router.get(
    "/prices",
    response_model=MarketOverviewResponse,
    summary="Live price table",
    description=(
        "Solana, Bitcoin and Ethereum market data. Falls back to a static "
        "snapshot (is_mock=true) when the market-data provider is unavailable."
    ),
)
def get_prices(
    use_case: GetMarketOverviewUseCase = Depends(get_market_overview_use_case),
) -> MarketOverviewResponse:
    """Return the price table with the serving tier."""
    result = use_case.execute()
    return MarketOverviewResponse(
        source=result.source,
        is_mock=result.is_mock,
        fetched_at=result.fetched_at,
        coins=[CoinItem(**asdict(coin)) for coin in result.coins],
        global_data=(
            GlobalItem(**asdict(result.global_data))
            if result.global_data is not None
            else None
        ),
    )
