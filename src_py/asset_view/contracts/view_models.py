"""
목적:
- 뷰 상태 스냅샷 인터페이스 모델을 정의한다.

설명:
- 조정자 내부 상태를 외부(표시 계층/테스트)에 읽기 전용 스냅샷으로 노출한다.
- 진행 단계를 문자열 상수로 통일한다.

디자인 패턴:
- 상태 객체(State DTO).

참조:
- src_py/asset_view/view/coordinator.py
- src_py/asset_view/view/presenter.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .records import AssetRecord

ViewPhase = Literal["IDLE", "LOADING", "CACHE_HIT", "FETCHING", "SORTING", "READY", "ERROR"]


class ViewState(BaseModel):
    """뷰 상태 스냅샷 모델."""

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=1, ge=1)
    query: str = Field(default="")
    displayed_records: tuple[AssetRecord, ...] = Field(default=())
    loading: bool = Field(default=False)
    sorting: bool = Field(default=False)
    phase: ViewPhase = Field(default="IDLE")
    last_error: str | None = Field(default=None)
