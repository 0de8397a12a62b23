"""
Port interfaces (ABCs) for the market bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.market.entities import CoinData, GlobalData, PriceSource


class MarketDataProvider(ABC):
    """Port for one tier of market data.

    Implementations raise MarketDataUnavailableError on any failure
    so the caller can move on to the next tier.
    """

    source: PriceSource

    @abstractmethod
    def fetch_markets(self, coin_ids: list[str]) -> list[CoinData]:
        """Return market data for the given coin ids."""
        raise NotImplementedError

    @abstractmethod
    def fetch_global(self) -> GlobalData:
        """Return aggregate market totals."""
        raise NotImplementedError
