"""
목적:
- 뷰 상태를 표시 계층이 쓰는 문자열/행 데이터로 변환한다.

설명:
- 상태 영역: 로딩 중이면 `Loading…`, 표시 레코드가 없으면 정렬 중 `Sorting…`,
  그 외 `No data found`. 표시 레코드가 있으면 상태 문구 없이 표를 그린다.
- IP/포트 목록은 콤마로 이어 붙인다.
- 렌더링 수단(터미널/GUI)은 소비자 애플리케이션의 책임이다.

디자인 패턴:
- 프레젠터(Presenter).

참조:
- src_py/asset_view/contracts/view_models.py
- scripts/run-view.py
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from asset_view.contracts.records import AssetRecord
from asset_view.contracts.view_models import ViewState

LOADING_TEXT = "Loading…"
SORTING_TEXT = "Sorting…"
EMPTY_TEXT = "No data found"
TABLE_HEADERS = ("ID", "Host", "Comment", "Owner", "IPs", "Ports")


@dataclass(slots=True, frozen=True)
class PageControls:
    """이전/다음 버튼 활성 상태와 페이지 라벨."""

    label: str
    previous_enabled: bool
    next_enabled: bool


def status_text(state: ViewState) -> str | None:
    """상태 영역 문구를 반환한다. 표를 그려야 하면 None이다."""
    if state.loading:
        return LOADING_TEXT
    if not state.displayed_records:
        return SORTING_TEXT if state.sorting else EMPTY_TEXT
    return None


def page_controls(state: ViewState) -> PageControls:
    return PageControls(
        label=f"Page {state.current_page} of {state.total_pages}",
        previous_enabled=state.current_page > 1,
        next_enabled=state.current_page < state.total_pages,
    )


def format_row(record: AssetRecord) -> tuple[str, ...]:
    return (
        str(record.id),
        record.host,
        record.comment,
        record.owner,
        ", ".join(record.ip_addresses()),
        ", ".join(str(port) for port in record.port_numbers()),
    )


def table_rows(records: Iterable[AssetRecord]) -> list[tuple[str, ...]]:
    return [format_row(record) for record in records]


def render_text(state: ViewState) -> str:
    """상태를 고정폭 텍스트 표로 렌더링한다."""
    controls = page_controls(state)
    lines = [controls.label]

    message = status_text(state)
    if message is not None:
        lines.append(message)
        return "\n".join(lines)

    rows = table_rows(state.displayed_records)
    widths = [len(header) for header in TABLE_HEADERS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    lines.append(_format_line(TABLE_HEADERS, widths))
    lines.append("  ".join("-" * width for width in widths))
    lines.extend(_format_line(row, widths) for row in rows)
    return "\n".join(lines)


def _format_line(cells: tuple[str, ...], widths: list[int]) -> str:
    return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()
