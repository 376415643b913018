"""
목적:
- 정렬 계층의 공개 심볼을 정의한다.

참조:
- src_py/asset_view/sort/sorter.py
"""

from .sorter import AssetSorter, collation_key, sort_records

__all__ = ["AssetSorter", "collation_key", "sort_records"]
