"""
목적:
- 페이지 레코드를 호스트명 기준 오름차순으로 비동기 정렬한다.

설명:
- 정렬 자체는 워커 스레드에서 수행해 이벤트 루프를 막지 않는다.
- `delay_ms`는 정렬 비용을 흉내 내는 최소 지연이며 알고리즘 요구사항이 아니다.
- 비교는 로캘 인지 콜레이션 키를 사용한다: 악센트/대소문자 무시 1차 비교,
  악센트 2차 비교, 동일 문자일 때 소문자 우선 3차 비교.
- 1차 비교에서 구두점/기호/공백은 숫자보다, 숫자는 문자보다 앞선다(`host_a` < `host1`).
  ICU 전체 규칙이 아니므로 언어별 테일러링은 반영하지 않는다.
- 입력을 변경하지 않고 새 튜플을 반환하며, 키가 같으면 원래 순서를 유지한다.

디자인 패턴:
- 전략(Strategy).

참조:
- src_py/asset_view/config/models.py
- src_py/asset_view/view/coordinator.py
"""

from __future__ import annotations

import asyncio
import time
import unicodedata
from collections.abc import Iterable

from asset_view.config.models import SorterConfig
from asset_view.contracts.records import AssetRecord


class AssetSorter:
    """호스트명 기준 비동기 정렬기."""

    def __init__(self, config: SorterConfig | None = None) -> None:
        self._config = config or SorterConfig()

    @property
    def delay_seconds(self) -> float:
        return self._config.delay_ms / 1000.0

    async def sort(self, records: Iterable[AssetRecord]) -> tuple[AssetRecord, ...]:
        """레코드를 정렬한 새 튜플을 반환한다."""
        started = time.monotonic()
        ordered = await asyncio.to_thread(sort_records, tuple(records))

        remaining = self.delay_seconds - (time.monotonic() - started)
        if remaining > 0:
            await asyncio.sleep(remaining)
        return ordered


def sort_records(records: Iterable[AssetRecord]) -> tuple[AssetRecord, ...]:
    """호스트명 콜레이션 키로 안정 정렬한다."""
    return tuple(sorted(records, key=lambda record: collation_key(record.host)))


def collation_key(value: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(char for char in decomposed if not unicodedata.combining(char)).casefold()
    primary = tuple((_char_group(char), char) for char in base)
    return (primary, decomposed.casefold(), value.swapcase())


def _char_group(char: str) -> int:
    # 구두점/기호/공백 < 숫자 < 문자
    category = unicodedata.category(char)[0]
    if category in {"P", "S", "Z"}:
        return 0
    if category == "N":
        return 1
    return 2
