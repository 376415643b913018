import asyncio

import httpx
import pytest

from asset_view import (
    AssetFetcher,
    ConfigurationError,
    FetcherConfig,
    FetchError,
    parse_total_count,
    total_pages_for,
)

from conftest import AssetServerStub, asset_payload


def _fetcher(handler) -> AssetFetcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AssetFetcher(FetcherConfig(base_url="http://assets.test/"), client=client)


def test_fetch_sends_page_limit_and_host_params(server: AssetServerStub) -> None:
    fetcher = AssetFetcher(FetcherConfig(base_url="http://assets.test"), client=server.client())

    outcome = asyncio.run(fetcher.fetch(2, 10, "web"))

    assert outcome.ok
    assert server.calls == [{"page": "2", "limit": "10", "host": "web"}]
    assert len(outcome.result.records) == 10
    assert outcome.result.total_count == 42


def test_fetch_omits_host_param_for_empty_query(server: AssetServerStub) -> None:
    fetcher = AssetFetcher(FetcherConfig(base_url="http://assets.test"), client=server.client())

    asyncio.run(fetcher.fetch(1))

    assert server.calls == [{"page": "1", "limit": "10"}]


def test_fetch_targets_assets_endpoint() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(f"{request.method} {request.url.path}")
        return httpx.Response(200, json=[], headers={"X-Total-Count": "0"})

    outcome = asyncio.run(_fetcher(handler).fetch(1, 10))

    assert outcome.ok
    assert seen == ["GET /assets"]


def test_fetch_treats_missing_count_header_as_zero() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[asset_payload(1, "a")])

    outcome = asyncio.run(_fetcher(handler).fetch(1, 10))

    assert outcome.ok
    assert outcome.result.total_count == 0


def test_fetch_treats_null_body_as_empty_page() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"null", headers={"X-Total-Count": "0"})

    outcome = asyncio.run(_fetcher(handler).fetch(1, 10, "nothing"))

    assert outcome.ok
    assert outcome.result.records == ()


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "Error in count query"}),
        httpx.Response(200, content=b"{not json"),
        httpx.Response(200, json={"error": "not a list"}),
        httpx.Response(200, json=[{"Host": "missing id"}]),
    ],
)
def test_fetch_returns_failure_value_instead_of_raising(response: httpx.Response) -> None:
    outcome = asyncio.run(_fetcher(lambda request: response).fetch(1, 10))

    assert not outcome.ok
    assert outcome.result is None
    assert isinstance(outcome.error, FetchError)


def test_fetch_reports_transport_error_as_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = asyncio.run(_fetcher(handler).fetch(1, 10))

    assert isinstance(outcome.error, FetchError)
    assert "connection refused" in str(outcome.error)


def test_fetch_rejects_invalid_arguments(server: AssetServerStub) -> None:
    fetcher = AssetFetcher(FetcherConfig(base_url="http://assets.test"), client=server.client())

    with pytest.raises(ConfigurationError, match="limit"):
        asyncio.run(fetcher.fetch(1, 0))
    with pytest.raises(ConfigurationError, match="page"):
        asyncio.run(fetcher.fetch(0, 10))
    assert server.calls == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 0), ("", 0), ("abc", 0), ("-3", 0), (" 42 ", 42)],
)
def test_parse_total_count(raw: str | None, expected: int) -> None:
    assert parse_total_count(raw) == expected


def test_total_pages_derivation() -> None:
    assert total_pages_for(25, 10) == 3
    assert total_pages_for(42, 10) == 5
    assert total_pages_for(30, 10) == 3
    assert total_pages_for(0, 10) == 1


def test_fetcher_config_builds_url() -> None:
    config = FetcherConfig(base_url="http://localhost:8080/")

    assert config.to_url() == "http://localhost:8080/assets"
    assert config.timeout_seconds() is None
    assert FetcherConfig(timeout_ms=2_500).timeout_seconds() == 2.5


def test_fetcher_closes_owned_client_on_exit() -> None:
    async def scenario() -> tuple[AssetFetcher, bool]:
        async with AssetFetcher(FetcherConfig(page_size=5)) as fetcher:
            assert fetcher.config.page_size == 5
            closed_inside = fetcher._client.is_closed
        return fetcher, closed_inside

    fetcher, was_closed_inside = asyncio.run(scenario())

    assert was_closed_inside is False
    assert fetcher._client.is_closed is True


def test_fetcher_leaves_injected_client_open(server: AssetServerStub) -> None:
    client = server.client()

    async def scenario() -> None:
        async with AssetFetcher(FetcherConfig(base_url="http://assets.test"), client=client):
            pass

    asyncio.run(scenario())

    assert client.is_closed is False
