"""
목적:
- 캐시 계층의 공개 심볼을 정의한다.

참조:
- src_py/asset_view/cache/result_cache.py
"""

from .result_cache import ResultCache

__all__ = ["ResultCache"]
