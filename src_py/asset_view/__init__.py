"""
목적:
- Asset View Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `ViewCoordinator`다.
- 캐시/조회/정렬/상태 구성요소와 설정/계약 모델/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/asset_view/view/coordinator.py
- src_py/asset_view/fetch/fetcher.py
"""

from .cache import ResultCache
from .config.models import FetcherConfig, SorterConfig, ViewConfig
from .contracts import (
    AssetRecord,
    CacheEntry,
    FetchResult,
    IPAddress,
    PageQuery,
    PortEntry,
    ViewPhase,
    ViewState,
)
from .exceptions import AssetViewError, ConfigurationError, FetchError
from .fetch import AssetFetcher, FetchOutcome, parse_total_count, total_pages_for
from .sort import AssetSorter
from .state import PaginationState, SearchState
from .version import __version__
from .view import ViewCoordinator, render_text, status_text

__all__ = [
    "__version__",
    "ViewCoordinator",
    "AssetFetcher",
    "AssetSorter",
    "ResultCache",
    "PaginationState",
    "SearchState",
    "FetchOutcome",
    "parse_total_count",
    "total_pages_for",
    "render_text",
    "status_text",
    "FetcherConfig",
    "SorterConfig",
    "ViewConfig",
    "AssetRecord",
    "IPAddress",
    "PortEntry",
    "PageQuery",
    "CacheEntry",
    "FetchResult",
    "ViewPhase",
    "ViewState",
    "AssetViewError",
    "ConfigurationError",
    "FetchError",
]
