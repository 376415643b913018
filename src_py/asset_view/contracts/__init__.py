"""
목적:
- 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 레코드/페이지 키/뷰 상태 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/asset_view/contracts/records.py
- src_py/asset_view/contracts/page_models.py
- src_py/asset_view/contracts/view_models.py
"""

from .page_models import CacheEntry, FetchResult, PageQuery
from .records import AssetRecord, IPAddress, PortEntry
from .view_models import ViewPhase, ViewState

__all__ = [
    "AssetRecord",
    "IPAddress",
    "PortEntry",
    "PageQuery",
    "CacheEntry",
    "FetchResult",
    "ViewPhase",
    "ViewState",
]
