"""
목적:
- 원격 자산 엔드포인트 조회용 비동기 HTTP 클라이언트를 제공한다.

설명:
- `GET /assets?page=&limit=[&host=]` 요청 1건을 보내고 레코드 목록과 전체 건수를 파싱한다.
- 전체 건수는 본문이 아닌 `X-Total-Count` 헤더에서 읽는다. 누락/비숫자 값은 0으로 본다.
- 네트워크/상태 코드/본문 파싱 실패는 예외로 던지지 않고 `FetchOutcome.error`로 반환한다.
- 재시도는 하지 않으며, 타임아웃은 설정에서 명시하지 않으면 무제한이다.

디자인 패턴:
- 어댑터(Adapter) + 결과 객체(Result Object).

참조:
- src_py/asset_view/config/models.py
- src_py/asset_view/contracts/page_models.py
- src_py/asset_view/view/coordinator.py
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import httpx
from pydantic import TypeAdapter, ValidationError

from asset_view.config.models import FetcherConfig
from asset_view.contracts.page_models import FetchResult
from asset_view.contracts.records import AssetRecord
from asset_view.exceptions import ConfigurationError, FetchError

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[AssetRecord])


@dataclass(slots=True)
class FetchOutcome:
    """조회 성공/실패 결과 모델. `result`와 `error` 중 하나만 채워진다."""

    result: FetchResult | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @classmethod
    def success(cls, result: FetchResult) -> FetchOutcome:
        return cls(result=result)

    @classmethod
    def failure(cls, error: FetchError) -> FetchOutcome:
        return cls(error=error)


class AssetFetcher:
    """원격 자산 조회 클라이언트."""

    def __init__(
        self,
        config: FetcherConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds())

    @property
    def config(self) -> FetcherConfig:
        """조회 설정 객체를 반환한다."""
        return self._config

    async def fetch(self, page: int, limit: int | None = None, query: str = "") -> FetchOutcome:
        """지정 페이지를 조회한다. 실패는 반환값으로 전달한다."""
        limit = self._config.page_size if limit is None else limit
        if page < 1:
            raise ConfigurationError(f"page는 1 이상이어야 합니다: page={page}")
        if limit < 1:
            raise ConfigurationError(f"limit는 1 이상이어야 합니다: limit={limit}")

        params: dict[str, str | int] = {"page": page, "limit": limit}
        if query:
            params[self._config.query_param] = query

        logger.debug("fetching assets: page=%s limit=%s query=%r", page, limit, query)

        try:
            result = await self._request(params)
        except FetchError as exc:
            logger.warning("asset fetch failed: page=%s query=%r error=%s", page, query, exc)
            return FetchOutcome.failure(exc)

        return FetchOutcome.success(result)

    async def _request(self, params: dict[str, str | int]) -> FetchResult:
        try:
            response = await self._client.get(self._config.to_url(), params=params)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchError(f"자산 HTTP 호출 실패: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"자산 응답 JSON 파싱 실패: {exc}") from exc

        # 일치하는 행이 없으면 백엔드는 빈 배열 대신 null을 반환한다.
        if payload is None:
            payload = []
        if not isinstance(payload, list):
            raise FetchError(f"자산 응답 본문이 배열이 아닙니다: type={type(payload).__name__}")

        try:
            records = _RECORDS_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            raise FetchError(f"자산 레코드 형식이 올바르지 않습니다: {exc}") from exc

        total_count = parse_total_count(response.headers.get(self._config.count_header))
        return FetchResult(records=tuple(records), total_count=total_count)

    async def aclose(self) -> None:
        """직접 생성한 HTTP 클라이언트를 닫는다."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AssetFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def parse_total_count(raw: str | None) -> int:
    """전체 건수 헤더 값을 정수로 변환한다. 누락/비숫자/음수는 0이다."""
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    return max(value, 0)


def total_pages_for(total_count: int, limit: int) -> int:
    """전체 건수와 페이지 크기로 전체 페이지 수를 계산한다. 최소 1페이지다."""
    if limit < 1:
        raise ConfigurationError(f"limit는 1 이상이어야 합니다: limit={limit}")
    return max(1, math.ceil(total_count / limit))
