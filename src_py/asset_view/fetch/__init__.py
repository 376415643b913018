"""
목적:
- 원격 조회 계층의 공개 심볼을 정의한다.

설명:
- 외부에는 `AssetFetcher`와 결과 객체, 페이지 수 계산 유틸을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/asset_view/fetch/fetcher.py
"""

from .fetcher import AssetFetcher, FetchOutcome, parse_total_count, total_pages_for

__all__ = [
    "AssetFetcher",
    "FetchOutcome",
    "parse_total_count",
    "total_pages_for",
]
