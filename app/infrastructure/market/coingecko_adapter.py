"""
Adapter: CoinGecko market data.

Implements MarketDataProvider port over the CoinGecko REST API.
One instance serves one tier: with an API key it is the authenticated
tier, without one it is the public tier.
"""

import logging
from typing import Any, Optional

import httpx

from app.domain.market.entities import CoinData, GlobalData, PriceSource
from app.domain.market.errors import MarketDataUnavailableError
from app.domain.market.ports import MarketDataProvider

logger = logging.getLogger(__name__)

PUBLIC_HOST = "https://api.coingecko.com"
PRO_HOST = "https://pro-api.coingecko.com"
PRO_KEY_PREFIX = "CG-"
PRO_KEY_HEADER = "x-cg-pro-api-key"
DEMO_KEY_HEADER = "x-cg-demo-api-key"

MARKETS_PATH = "/api/v3/coins/markets"
GLOBAL_PATH = "/api/v3/global"


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


class CoinGeckoMarketDataAdapter(MarketDataProvider):
    """Fetches coin markets and global totals from CoinGecko.

    Pro keys (``CG-...``) go to the pro host with the pro header,
    any other key is sent as a demo key to the public host.
    Every failure is raised as MarketDataUnavailableError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._transport = transport
        self._headers = {"accept": "application/json"}

        if api_key:
            self.source = PriceSource.AUTHENTICATED
            if api_key.startswith(PRO_KEY_PREFIX):
                self._host = PRO_HOST
                self._headers[PRO_KEY_HEADER] = api_key
            else:
                self._host = PUBLIC_HOST
                self._headers[DEMO_KEY_HEADER] = api_key
        else:
            self.source = PriceSource.PUBLIC
            self._host = PUBLIC_HOST

    def fetch_markets(self, coin_ids: list[str]) -> list[CoinData]:
        """Return market rows for the given coin ids, by market cap."""
        params = {
            "vs_currency": "usd",
            "ids": ",".join(coin_ids),
            "order": "market_cap_desc",
            "sparkline": "true",
            "price_change_percentage": "1h,24h,7d",
        }
        payload = self._get_json(MARKETS_PATH, params)
        if not isinstance(payload, list) or not all(
            isinstance(item, dict) for item in payload
        ):
            raise MarketDataUnavailableError(
                self.source.value, "unexpected markets payload"
            )

        try:
            return [self._parse_coin(item) for item in payload]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise MarketDataUnavailableError(
                self.source.value, f"malformed coin entry: {exc}"
            ) from exc

    def fetch_global(self) -> GlobalData:
        """Return aggregate market totals in USD."""
        payload = self._get_json(GLOBAL_PATH)
        try:
            data = payload["data"]
            return GlobalData(
                total_market_cap_usd=_optional_float(
                    data.get("total_market_cap", {}).get("usd")
                ),
                total_volume_usd=_optional_float(
                    data.get("total_volume", {}).get("usd")
                ),
                btc_dominance=_optional_float(
                    data.get("market_cap_percentage", {}).get("btc")
                ),
                market_cap_change_percentage_24h=_optional_float(
                    data.get("market_cap_change_percentage_24h_usd")
                ),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise MarketDataUnavailableError(
                self.source.value, f"malformed global payload: {exc}"
            ) from exc

    def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        try:
            with httpx.Client(
                base_url=self._host,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.get(path, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "CoinGecko %s returned HTTP %d",
                path,
                exc.response.status_code,
            )
            raise MarketDataUnavailableError(
                self.source.value, f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("CoinGecko %s request failed: %s", path, type(exc).__name__)
            raise MarketDataUnavailableError(
                self.source.value, type(exc).__name__
            ) from exc
        except ValueError as exc:
            raise MarketDataUnavailableError(
                self.source.value, "response body is not JSON"
            ) from exc

    @staticmethod
    def _parse_coin(item: dict) -> CoinData:
        sparkline = (item.get("sparkline_in_7d") or {}).get("price") or []
        change_24h = item.get("price_change_percentage_24h_in_currency")
        if change_24h is None:
            change_24h = item.get("price_change_percentage_24h")

        return CoinData(
            id=item["id"],
            symbol=item["symbol"],
            name=item["name"],
            image=item.get("image") or "",
            current_price=_optional_float(item.get("current_price")),
            price_change_percentage_1h=_optional_float(
                item.get("price_change_percentage_1h_in_currency")
            ),
            price_change_percentage_24h=_optional_float(change_24h),
            price_change_percentage_7d=_optional_float(
                item.get("price_change_percentage_7d_in_currency")
            ),
            market_cap=_optional_float(item.get("market_cap")),
            total_volume=_optional_float(item.get("total_volume")),
            sparkline=tuple(float(price) for price in sparkline),
        )
