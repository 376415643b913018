"""
목적:
- 뷰 계층의 공개 심볼을 정의한다.

설명:
- 외부에는 `ViewCoordinator`를 기본 진입점으로 제공하고, 표시용 변환 유틸을 함께 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/asset_view/view/coordinator.py
- src_py/asset_view/view/presenter.py
"""

from .coordinator import ViewCoordinator, ViewListener
from .presenter import (
    EMPTY_TEXT,
    LOADING_TEXT,
    SORTING_TEXT,
    TABLE_HEADERS,
    PageControls,
    format_row,
    page_controls,
    render_text,
    status_text,
    table_rows,
)

__all__ = [
    "ViewCoordinator",
    "ViewListener",
    "PageControls",
    "LOADING_TEXT",
    "SORTING_TEXT",
    "EMPTY_TEXT",
    "TABLE_HEADERS",
    "status_text",
    "page_controls",
    "format_row",
    "table_rows",
    "render_text",
]
