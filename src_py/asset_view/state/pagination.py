"""
목적:
- 현재 페이지와 전체 페이지 수를 관리한다.

설명:
- 범위를 벗어난 페이지 요청은 상태 변경 없이 거절한다(사용자 오류로 노출하지 않음).
- 전체 페이지 수가 줄어들면 현재 페이지를 새 최대값으로 보정한다.
- 전체 페이지 수는 항상 1 이상으로 유지한다.

디자인 패턴:
- 상태 객체(State Object).

참조:
- src_py/asset_view/state/search.py
- src_py/asset_view/view/coordinator.py
"""

from __future__ import annotations


class PaginationState:
    """페이지 위치 상태."""

    def __init__(self, current_page: int = 1, total_pages: int = 1) -> None:
        self._total_pages = max(total_pages, 1)
        self._current_page = min(max(current_page, 1), self._total_pages)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def has_previous(self) -> bool:
        return self._current_page > 1

    @property
    def has_next(self) -> bool:
        return self._current_page < self._total_pages

    @property
    def label(self) -> str:
        """표시용 페이지 라벨을 반환한다."""
        return f"Page {self._current_page} of {self._total_pages}"

    def request_page(self, page: int) -> bool:
        """페이지 이동을 요청한다. 1..total_pages 범위일 때만 수락한다."""
        if page < 1 or page > self._total_pages:
            return False
        self._current_page = page
        return True

    def set_total_pages(self, total_pages: int) -> None:
        """전체 페이지 수를 갱신하고 현재 페이지를 범위 안으로 보정한다."""
        self._total_pages = max(total_pages, 1)
        if self._current_page > self._total_pages:
            self._current_page = self._total_pages

    def reset(self) -> None:
        """현재 페이지를 1로 되돌린다."""
        self._current_page = 1
