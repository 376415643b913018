"""
목적:
- 페이지 조회 키와 캐시 엔트리, 조회 결과 모델을 정의한다.

설명:
- `PageQuery`는 (페이지, 검색어) 쌍이며 `page=<n>&searchQuery=<q>` 직렬화를 캐시 키로 쓴다.
  페이지가 숫자이고 앞에 오므로 검색어에 `&`가 있어도 키가 충돌하지 않는다.
- `CacheEntry`는 최초 성공 조회 시 생성되고 이후 변경되지 않는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/asset_view/cache/result_cache.py
- src_py/asset_view/view/coordinator.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .records import AssetRecord


class PageQuery(BaseModel):
    """캐시 가능한 단일 뷰를 식별하는 (페이지, 검색어) 모델."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    query: str = Field(default="")

    def cache_key(self) -> str:
        """결정적 캐시 키 문자열을 생성한다."""
        return f"page={self.page}&searchQuery={self.query}"


class CacheEntry(BaseModel):
    """캐시된 페이지 조회 결과 모델."""

    model_config = ConfigDict(frozen=True)

    records: tuple[AssetRecord, ...] = Field(default=())
    total_pages: int = Field(default=1, ge=1)


class FetchResult(BaseModel):
    """원격 조회 성공 결과 모델. `total_count`는 헤더에서 읽은 전체 건수다."""

    model_config = ConfigDict(frozen=True)

    records: tuple[AssetRecord, ...] = Field(default=())
    total_count: int = Field(default=0, ge=0)
