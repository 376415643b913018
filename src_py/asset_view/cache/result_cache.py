"""
목적:
- (페이지, 검색어) 조합별 조회 결과를 메모리에 보관한다.

설명:
- 만료/용량 제한이 없으며 소유자(뷰 조정자)의 수명 동안 유지된다.
- 같은 키에 대한 재기록은 마지막 기록이 남는다. 같은 키의 엔트리는 동일하다고 가정한다.
- 단일 이벤트 루프 접근만 가정하며 별도 동기화 수단은 두지 않는다.

디자인 패턴:
- 저장소 패턴(Repository Pattern).

참조:
- src_py/asset_view/contracts/page_models.py
- src_py/asset_view/view/coordinator.py
"""

from __future__ import annotations

from asset_view.contracts.page_models import CacheEntry, PageQuery


class ResultCache:
    """페이지 조회 결과 인메모리 캐시."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: PageQuery) -> CacheEntry | None:
        """캐시 엔트리를 조회한다. 없으면 None을 반환한다."""
        return self._entries.get(key.cache_key())

    def put(self, key: PageQuery, entry: CacheEntry) -> None:
        """캐시 엔트리를 저장한다."""
        self._entries[key.cache_key()] = entry

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, PageQuery):
            return False
        return key.cache_key() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
