from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from asset_view import AssetFetcher, AssetSorter, FetcherConfig, SorterConfig, ViewConfig, ViewCoordinator


def asset_payload(asset_id: int, host: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "ID": asset_id,
        "Host": host,
        "Comment": f"comment {asset_id}",
        "Owner": "ops",
        "IPs": [{"Address": f"10.0.0.{asset_id % 250}", "Signature": "ip-sig"}],
        "Ports": [{"Port": 22, "Signature": "port-sig"}, {"Port": 443, "Signature": "port-sig"}],
        "Signature": f"sig-{asset_id}",
    }
    payload.update(overrides)
    return payload


class AssetServerStub:
    """`GET /assets` 동작을 흉내 내는 MockTransport 핸들러."""

    def __init__(self, total_count: int = 42) -> None:
        self.total_count = total_count
        self.calls: list[dict[str, str]] = []
        self.failing_pages: set[int] = set()
        self.total_overrides: dict[int, int] = {}
        self.gates: dict[int, asyncio.Event] = {}

    async def handle(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.calls.append(params)
        page = int(params["page"])
        limit = int(params["limit"])
        query = params.get("host", "")

        gate = self.gates.get(page)
        if gate is not None:
            await gate.wait()

        if page in self.failing_pages:
            return httpx.Response(500, json={"error": "Error in count query"})

        total = self.total_overrides.get(page, self.total_count)
        count = max(0, min(limit, total - (page - 1) * limit))
        prefix = query or "host"
        records = [
            asset_payload((page - 1) * limit + index + 1, f"{prefix}-{page}-{count - index:02d}")
            for index in range(count)
        ]
        return httpx.Response(200, json=records, headers={"X-Total-Count": str(total)})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


@pytest.fixture
def server() -> AssetServerStub:
    return AssetServerStub()


def build_coordinator(
    server: AssetServerStub,
    page_size: int = 10,
    sorter: AssetSorter | None = None,
) -> ViewCoordinator:
    config = ViewConfig(
        fetcher=FetcherConfig(base_url="http://assets.test", page_size=page_size),
        sorter=SorterConfig(delay_ms=0),
    )
    fetcher = AssetFetcher(config.fetcher, client=server.client())
    return ViewCoordinator(config, fetcher=fetcher, sorter=sorter)
