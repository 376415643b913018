"""
목적:
- 페이지/검색 상태 계층의 공개 심볼을 정의한다.

참조:
- src_py/asset_view/state/pagination.py
- src_py/asset_view/state/search.py
"""

from .pagination import PaginationState
from .search import SearchState

__all__ = ["PaginationState", "SearchState"]
