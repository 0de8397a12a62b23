"""
Domain-specific errors for the market bounded context.

Provider failures never reach the HTTP layer: the price service
catches them and degrades to the next tier.
No framework imports allowed.
"""


class MarketDomainError(Exception):
    """Base error for all market domain errors."""

    code = "market_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MarketDataUnavailableError(MarketDomainError):
    """Raised by a provider adapter when its tier cannot serve data."""

    code = "market_data_unavailable"

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Market data unavailable from {source}: {reason}")
        self.source = source
        self.reason = reason
