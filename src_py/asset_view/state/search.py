"""
목적:
- 활성 검색어를 관리한다.

설명:
- 검색어 변경은 항상 성공하며, 부수 효과로 페이지 위치를 1로 되돌린다.

디자인 패턴:
- 상태 객체(State Object).

참조:
- src_py/asset_view/state/pagination.py
"""

from __future__ import annotations

from asset_view.state.pagination import PaginationState


class SearchState:
    """검색어 상태. 페이지 상태와 결합되어 있다."""

    def __init__(self, pagination: PaginationState, query: str = "") -> None:
        self._pagination = pagination
        self._query = query

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, query: str) -> None:
        self._query = query
        self._pagination.reset()
