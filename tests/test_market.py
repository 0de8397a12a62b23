"""
Tests for the market bounded context.

Covers:
- Display formatting and sparkline geometry
- TTLCache expiry
- GetMarketOverviewUseCase tier ordering and caching
- CoinGeckoMarketDataAdapter against httpx.MockTransport
- GET /api/prices
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.application.market.get_market_overview import GetMarketOverviewUseCase
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
from app.infrastructure.market.coingecko_adapter import (
    DEMO_KEY_HEADER,
    PRO_KEY_HEADER,
    CoinGeckoMarketDataAdapter,
)
from app.infrastructure.market.static_snapshot_adapter import (
    StaticMarketDataAdapter,
)
from app.interfaces.market.dependencies import get_market_overview_use_case
from app.main import app
from app.shared.cache import TTLCache

client = TestClient(app)

COIN_IDS = ["solana", "bitcoin", "ethereum"]

MARKETS_PAYLOAD = [
    {
        "id": "solana",
        "symbol": "sol",
        "name": "Solana",
        "image": "https://coin-images.coingecko.com/coins/images/4128/large/solana.png",
        "current_price": 150.1,
        "market_cap": 72_000_000_000,
        "total_volume": 3_100_000_000,
        "price_change_percentage_24h": 2.5,
        "price_change_percentage_1h_in_currency": 0.3,
        "price_change_percentage_24h_in_currency": 2.5,
        "price_change_percentage_7d_in_currency": -4.0,
        "sparkline_in_7d": {"price": [140.0, 145.5, 150.1]},
    }
]

GLOBAL_PAYLOAD = {
    "data": {
        "total_market_cap": {"usd": 3_400_000_000_000},
        "total_volume": {"usd": 120_000_000_000},
        "market_cap_percentage": {"btc": 56.8},
        "market_cap_change_percentage_24h_usd": 1.25,
    }
}


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class FakeProvider(MarketDataProvider):
    """Records calls into a shared log and fails on demand."""

    def __init__(
        self,
        source: PriceSource,
        log: list[str],
        coins: list[CoinData] | None = None,
        fail: bool = False,
        fail_global: bool = False,
    ) -> None:
        self.source = source
        self._log = log
        self._coins = coins or [_coin("solana")]
        self._fail = fail
        self._fail_global = fail_global

    def fetch_markets(self, coin_ids: list[str]) -> list[CoinData]:
        self._log.append(self.source.value)
        if self._fail:
            raise MarketDataUnavailableError(self.source.value, "HTTP 500")
        return self._coins

    def fetch_global(self) -> GlobalData:
        if self._fail_global:
            raise MarketDataUnavailableError(self.source.value, "HTTP 429")
        return GlobalData(1.0, 2.0, 50.0, 0.5)


def _coin(coin_id: str, price: float = 10.0) -> CoinData:
    return CoinData(
        id=coin_id,
        symbol=coin_id[:3],
        name=coin_id.title(),
        current_price=price,
        price_change_percentage_24h=1.0,
    )


def _use_case(
    providers: list[MarketDataProvider], cache: TTLCache | None = None
) -> GetMarketOverviewUseCase:
    return GetMarketOverviewUseCase(
        providers=providers,
        fallback=StaticMarketDataAdapter(),
        cache=cache or TTLCache(),
        coin_ids=COIN_IDS,
        live_ttl_seconds=60,
        fallback_ttl_seconds=120,
    )


# =====================================================================
# Formatting
# =====================================================================


class TestFormatting:
    """Tests for the price table formatters."""

    def test_usd_large_price_two_decimals(self) -> None:
        assert format_usd(97_350.0) == "$97,350.00"

    def test_usd_small_price_four_decimals(self) -> None:
        assert format_usd(0.0012) == "$0.0012"

    def test_compact_suffixes(self) -> None:
        assert format_compact(72_400_000_000) == "72.4B"
        assert format_compact(1_920_000_000_000) == "1.92T"
        assert format_compact(3_200_000_000) == "3.2B"
        assert format_compact(950) == "950"

    def test_compact_rounds_up_to_next_suffix(self) -> None:
        """999,999 renders as 1M rather than 1000K."""
        assert format_compact(999_999) == "1M"

    def test_percent_sign(self) -> None:
        assert format_percent(3.24) == "+3.24%"
        assert format_percent(-1.12) == "-1.12%"
        assert format_percent(0) == "+0.00%"

    def test_missing_values_render_as_dash(self) -> None:
        assert format_usd(None) == "-"
        assert format_compact(None) == "-"
        assert format_percent(None) == "-"


class TestSparklinePoints:
    """Tests for sparkline polyline geometry."""

    def test_two_points_span_full_height(self) -> None:
        assert sparkline_points([1, 2]) == "0.0,30.0 120.0,2.0"

    def test_flat_series_sits_on_baseline(self) -> None:
        assert sparkline_points([5, 5, 5]) == "0.0,30.0 60.0,30.0 120.0,30.0"

    def test_too_few_values(self) -> None:
        assert sparkline_points([1.0]) is None
        assert sparkline_points([]) is None


# =====================================================================
# Entities and cache
# =====================================================================


class TestEntities:
    """Tests for market entities."""

    def test_is_up_treats_missing_change_as_flat(self) -> None:
        coin = CoinData(id="x", symbol="x", name="X", current_price=1.0)
        assert coin.is_up is True

    def test_is_mock_only_for_static_source(self) -> None:
        assert MarketSnapshot(coins=(), source=PriceSource.STATIC).is_mock
        assert not MarketSnapshot(coins=(), source=PriceSource.PUBLIC).is_mock


class TestTTLCache:
    """Tests for the process-local TTL cache."""

    def test_value_expires_after_ttl(self) -> None:
        clock = FakeClock()
        cache = TTLCache(clock=clock)
        cache.set("key", "value", ttl_seconds=60)

        clock.now += 59
        assert cache.get("key") == "value"
        clock.now += 1
        assert cache.get("key") is None

    def test_missing_key(self) -> None:
        assert TTLCache().get("nope") is None


# =====================================================================
# GetMarketOverviewUseCase
# =====================================================================


class TestGetMarketOverviewUseCase:
    """Tests for the tier fallback orchestration."""

    def test_authenticated_tier_wins(self) -> None:
        log: list[str] = []
        use_case = _use_case(
            [
                FakeProvider(PriceSource.AUTHENTICATED, log),
                FakeProvider(PriceSource.PUBLIC, log),
            ]
        )

        result = use_case.execute()

        assert result.source == "authenticated"
        assert result.is_mock is False
        assert log == ["authenticated"]

    def test_public_tier_tried_before_static(self) -> None:
        """An authenticated failure falls through to the public call."""
        log: list[str] = []
        use_case = _use_case(
            [
                FakeProvider(PriceSource.AUTHENTICATED, log, fail=True),
                FakeProvider(PriceSource.PUBLIC, log),
            ]
        )

        result = use_case.execute()

        assert log == ["authenticated", "public"]
        assert result.source == "public"
        assert result.is_mock is False

    def test_static_snapshot_after_all_live_tiers_fail(self) -> None:
        log: list[str] = []
        use_case = _use_case(
            [
                FakeProvider(PriceSource.AUTHENTICATED, log, fail=True),
                FakeProvider(PriceSource.PUBLIC, log, fail=True),
            ]
        )

        result = use_case.execute()

        assert log == ["authenticated", "public"]
        assert result.source == "static"
        assert result.is_mock is True
        assert [coin.id for coin in result.coins] == COIN_IDS
        assert result.global_data is not None

    def test_global_failure_keeps_live_tier(self) -> None:
        log: list[str] = []
        use_case = _use_case(
            [FakeProvider(PriceSource.PUBLIC, log, fail_global=True)]
        )

        result = use_case.execute()

        assert result.source == "public"
        assert result.global_data is None

    def test_snapshot_is_cached(self) -> None:
        log: list[str] = []
        use_case = _use_case([FakeProvider(PriceSource.PUBLIC, log)])

        use_case.execute()
        use_case.execute()

        assert log == ["public"]

    def test_static_snapshot_cached_longer_than_live(self) -> None:
        clock = FakeClock()
        cache = TTLCache(clock=clock)
        log: list[str] = []
        use_case = _use_case(
            [FakeProvider(PriceSource.PUBLIC, log, fail=True)], cache=cache
        )

        use_case.execute()
        clock.now += 90
        use_case.execute()
        assert log == ["public"]

        clock.now += 30
        use_case.execute()
        assert log == ["public", "public"]

    def test_result_carries_display_strings(self) -> None:
        log: list[str] = []
        coin = CoinData(
            id="solana",
            symbol="sol",
            name="Solana",
            current_price=148.52,
            price_change_percentage_24h=3.24,
            market_cap=72_400_000_000,
            sparkline=(1.0, 2.0),
        )
        use_case = _use_case([FakeProvider(PriceSource.PUBLIC, log, coins=[coin])])

        row = use_case.execute().coins[0]

        assert row.display.price == "$148.52"
        assert row.display.change_24h == "+3.24%"
        assert row.display.change_1h == "-"
        assert row.display.market_cap == "72.4B"
        assert row.sparkline_points == "0.0,30.0 120.0,2.0"


# =====================================================================
# CoinGeckoMarketDataAdapter
# =====================================================================


def _transport(status: int = 200, markets=MARKETS_PAYLOAD, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if request.url.path.endswith("/global"):
            return httpx.Response(status, json=GLOBAL_PAYLOAD)
        return httpx.Response(status, json=markets)

    return httpx.MockTransport(handler)


class TestCoinGeckoMarketDataAdapter:
    """Tests for the CoinGecko HTTP adapter."""

    def test_pro_key_uses_pro_host_and_header(self) -> None:
        seen: list[httpx.Request] = []
        adapter = CoinGeckoMarketDataAdapter(
            api_key="CG-secret", transport=_transport(seen=seen)
        )

        adapter.fetch_markets(COIN_IDS)

        assert adapter.source is PriceSource.AUTHENTICATED
        assert seen[0].url.host == "pro-api.coingecko.com"
        assert seen[0].headers[PRO_KEY_HEADER] == "CG-secret"

    def test_demo_key_uses_public_host_and_demo_header(self) -> None:
        seen: list[httpx.Request] = []
        adapter = CoinGeckoMarketDataAdapter(
            api_key="demo-key", transport=_transport(seen=seen)
        )

        adapter.fetch_markets(COIN_IDS)

        assert seen[0].url.host == "api.coingecko.com"
        assert seen[0].headers[DEMO_KEY_HEADER] == "demo-key"
        assert PRO_KEY_HEADER not in seen[0].headers

    def test_public_tier_sends_no_key(self) -> None:
        seen: list[httpx.Request] = []
        adapter = CoinGeckoMarketDataAdapter(transport=_transport(seen=seen))

        adapter.fetch_markets(COIN_IDS)

        assert adapter.source is PriceSource.PUBLIC
        assert DEMO_KEY_HEADER not in seen[0].headers
        assert seen[0].url.params["ids"] == "solana,bitcoin,ethereum"
        assert seen[0].url.params["price_change_percentage"] == "1h,24h,7d"

    def test_parses_coin_fields(self) -> None:
        adapter = CoinGeckoMarketDataAdapter(transport=_transport())

        coin = adapter.fetch_markets(COIN_IDS)[0]

        assert coin.id == "solana"
        assert coin.current_price == 150.1
        assert coin.price_change_percentage_1h == 0.3
        assert coin.price_change_percentage_7d == -4.0
        assert coin.sparkline == (140.0, 145.5, 150.1)

    def test_parses_global_totals(self) -> None:
        adapter = CoinGeckoMarketDataAdapter(transport=_transport())

        data = adapter.fetch_global()

        assert data.total_market_cap_usd == 3_400_000_000_000
        assert data.btc_dominance == 56.8
        assert data.market_cap_change_percentage_24h == 1.25

    def test_http_error_raises_unavailable(self) -> None:
        adapter = CoinGeckoMarketDataAdapter(transport=_transport(status=500))

        with pytest.raises(MarketDataUnavailableError) as exc_info:
            adapter.fetch_markets(COIN_IDS)
        assert exc_info.value.reason == "HTTP 500"

    def test_network_error_raises_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = CoinGeckoMarketDataAdapter(transport=httpx.MockTransport(handler))

        with pytest.raises(MarketDataUnavailableError):
            adapter.fetch_markets(COIN_IDS)

    def test_non_json_body_raises_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>maintenance</html>")

        adapter = CoinGeckoMarketDataAdapter(transport=httpx.MockTransport(handler))

        with pytest.raises(MarketDataUnavailableError):
            adapter.fetch_markets(COIN_IDS)

    def test_unexpected_payload_raises_unavailable(self) -> None:
        adapter = CoinGeckoMarketDataAdapter(
            transport=_transport(markets={"error": "rate limited"})
        )

        with pytest.raises(MarketDataUnavailableError):
            adapter.fetch_markets(COIN_IDS)

    def test_non_object_coin_entry_raises_unavailable(self) -> None:
        adapter = CoinGeckoMarketDataAdapter(transport=_transport(markets=["solana"]))

        with pytest.raises(MarketDataUnavailableError):
            adapter.fetch_markets(COIN_IDS)

    def test_malformed_sparkline_raises_unavailable(self) -> None:
        markets = [{**MARKETS_PAYLOAD[0], "sparkline_in_7d": [1]}]
        adapter = CoinGeckoMarketDataAdapter(transport=_transport(markets=markets))

        with pytest.raises(MarketDataUnavailableError):
            adapter.fetch_markets(COIN_IDS)

    def test_malformed_payload_degrades_to_static_tier(self) -> None:
        use_case = _use_case(
            [CoinGeckoMarketDataAdapter(transport=_transport(markets=["solana"]))]
        )

        result = use_case.execute()

        assert result.source == "static"
        assert result.is_mock is True


# =====================================================================
# GET /api/prices
# =====================================================================


class TestPricesEndpoint:
    """Tests for GET /api/prices."""

    def test_static_fallback_response(self) -> None:
        """With every live tier down, the static snapshot is served."""
        log: list[str] = []
        app.dependency_overrides[get_market_overview_use_case] = lambda: _use_case(
            [FakeProvider(PriceSource.PUBLIC, log, fail=True)]
        )

        response = client.get("/api/prices")

        assert response.status_code == 200
        body = response.json()
        assert body["is_mock"] is True
        assert body["source"] == "static"
        assert [coin["id"] for coin in body["coins"]] == COIN_IDS
        assert body["coins"][0]["display"]["price"] == "$148.52"
        assert body["global_data"]["display_market_cap"] == "3.35T"

    def test_live_response_through_adapter(self) -> None:
        app.dependency_overrides[get_market_overview_use_case] = lambda: _use_case(
            [CoinGeckoMarketDataAdapter(transport=_transport())]
        )

        body = client.get("/api/prices").json()

        assert body["source"] == "public"
        assert body["is_mock"] is False
        assert body["coins"][0]["sparkline"] == [140.0, 145.5, 150.1]
        assert body["coins"][0]["display"]["change_7d"] == "-4.00%"
        assert body["global_data"]["btc_dominance"] == 56.8
