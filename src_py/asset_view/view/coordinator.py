"""
목적:
- (페이지, 검색어) 변경마다 캐시 조회 → 원격 조회 → 정렬 → 게시 흐름을 조정한다.

설명:
- 캐시 적중 시 네트워크를 건너뛰고 바로 정렬 단계로 간다.
- 캐시 미스 시 원격 조회 후 결과를 캐시에 저장하고 전체 페이지 수를 갱신한다.
- 조회 실패는 ERROR 단계로 게시하며 로딩 플래그를 해제하고 표시 레코드는 유지한다.
- 모든 비동기 작업은 발급 시점의 티켓(순번 + PageQuery)을 가진다.
  완료 시점에 최신 티켓이 아니면 뷰 상태에 반영하지 않는다(마지막 요청 우선).
  이미 조회된 데이터는 캐시에는 저장한다.
- 같은 키에 대한 동시 조회는 하나의 원격 호출을 공유한다(single-flight).
- 진행 중 작업은 취소하지 않는다.

디자인 패턴:
- 조정자(Coordinator) + 관찰자(Observer).

참조:
- src_py/asset_view/cache/result_cache.py
- src_py/asset_view/fetch/fetcher.py
- src_py/asset_view/sort/sorter.py
- src_py/asset_view/state/pagination.py
- src_py/asset_view/state/search.py
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from asset_view.cache.result_cache import ResultCache
from asset_view.config.models import ViewConfig
from asset_view.contracts.page_models import CacheEntry, PageQuery
from asset_view.contracts.records import AssetRecord
from asset_view.contracts.view_models import ViewPhase, ViewState
from asset_view.exceptions import ConfigurationError, FetchError
from asset_view.fetch.fetcher import AssetFetcher, total_pages_for
from asset_view.sort.sorter import AssetSorter
from asset_view.state.pagination import PaginationState
from asset_view.state.search import SearchState

logger = logging.getLogger(__name__)

ViewListener = Callable[[ViewState], None]


@dataclass(slots=True, frozen=True)
class _Ticket:
    sequence: int
    key: PageQuery


class ViewCoordinator:
    """페이지/검색 변경에 따라 조회·캐시·정렬을 조정하는 뷰 클래스."""

    def __init__(
        self,
        config: ViewConfig | None = None,
        fetcher: AssetFetcher | None = None,
        sorter: AssetSorter | None = None,
        cache: ResultCache | None = None,
    ) -> None:
        self._config = config or ViewConfig()
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or AssetFetcher(self._config.fetcher)
        self._sorter = sorter or AssetSorter(self._config.sorter)
        self._cache = ResultCache() if cache is None else cache

        self._pagination = PaginationState()
        self._search = SearchState(self._pagination)

        self._displayed: tuple[AssetRecord, ...] = ()
        self._loading = False
        self._sorting = False
        self._phase: ViewPhase = "IDLE"
        self._last_error: str | None = None

        self._sequence = 0
        self._inflight: dict[str, asyncio.Task[CacheEntry]] = {}
        self._tasks: set[asyncio.Task[None]] = set()
        self._listeners: list[ViewListener] = []

    @property
    def cache(self) -> ResultCache:
        return self._cache

    @property
    def page_size(self) -> int:
        return self._config.fetcher.page_size

    @property
    def current_key(self) -> PageQuery:
        return PageQuery(page=self._pagination.current_page, query=self._search.query)

    @property
    def state(self) -> ViewState:
        """현재 뷰 상태 스냅샷을 반환한다."""
        return ViewState(
            current_page=self._pagination.current_page,
            total_pages=self._pagination.total_pages,
            query=self._search.query,
            displayed_records=self._displayed,
            loading=self._loading,
            sorting=self._sorting,
            phase=self._phase,
            last_error=self._last_error,
        )

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """상태 게시 리스너를 등록하고 해제 함수를 반환한다."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_page(self, page: int) -> bool:
        """페이지 이동을 요청한다. 범위 밖이면 상태 변경 없이 False를 반환한다."""
        loop = _running_loop()
        previous = self.current_key
        if not self._pagination.request_page(page):
            logger.debug(
                "page request rejected: page=%s total_pages=%s",
                page,
                self._pagination.total_pages,
            )
            return False

        self._schedule_if_changed(loop, previous)
        return True

    def next_page(self) -> bool:
        return self.request_page(self._pagination.current_page + 1)

    def previous_page(self) -> bool:
        return self.request_page(self._pagination.current_page - 1)

    def set_query(self, query: str) -> None:
        """검색어를 변경한다. 페이지 위치는 1로 돌아간다."""
        loop = _running_loop()
        previous = self.current_key
        self._search.set_query(query)
        self._schedule_if_changed(loop, previous)

    async def refresh(self) -> None:
        """현재 키를 즉시 로드하고 완료까지 대기한다."""
        await self._run(self._issue_ticket(self.current_key))

    async def wait_until_settled(self) -> None:
        """예약된 모든 로드 작업이 끝날 때까지 대기한다."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        """진행 중 작업을 마무리하고 직접 생성한 조회 클라이언트를 닫는다."""
        await self.wait_until_settled()
        if self._owns_fetcher:
            await self._fetcher.aclose()

    def _schedule_if_changed(self, loop: asyncio.AbstractEventLoop, previous: PageQuery) -> None:
        key = self.current_key
        if key == previous:
            return

        task = loop.create_task(self._run(self._issue_ticket(key)))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _issue_ticket(self, key: PageQuery) -> _Ticket:
        self._sequence += 1
        return _Ticket(sequence=self._sequence, key=key)

    def _is_current(self, ticket: _Ticket) -> bool:
        return ticket.sequence == self._sequence

    async def _run(self, ticket: _Ticket) -> None:
        key = ticket.key
        self._publish(ticket, "LOADING")

        entry = self._cache.get(key)
        if entry is not None:
            logger.debug("cache hit: key=%s", key.cache_key())
            if self._is_current(ticket):
                self._loading = False
            self._publish(ticket, "CACHE_HIT")
        else:
            if self._is_current(ticket):
                self._loading = True
                self._sorting = False
            self._publish(ticket, "FETCHING")
            try:
                entry = await self._fetch_shared(key)
            except FetchError as exc:
                if not self._is_current(ticket):
                    logger.debug("stale fetch failure discarded: key=%s", key.cache_key())
                    return
                self._loading = False
                self._sorting = False
                self._last_error = str(exc)
                self._publish(ticket, "ERROR")
                return

            if not self._is_current(ticket):
                logger.debug("stale fetch result discarded: key=%s", key.cache_key())
                return
            self._loading = False
            self._last_error = None

        if not self._is_current(ticket):
            return

        self._pagination.set_total_pages(entry.total_pages)
        if self.current_key != key:
            # 전체 페이지 수 축소로 현재 페이지가 보정되면 보정된 키를 다시 로드한다.
            logger.debug(
                "current page clamped: key=%s total_pages=%s",
                key.cache_key(),
                entry.total_pages,
            )
            self._schedule_if_changed(asyncio.get_running_loop(), key)
            return

        self._sorting = True
        self._publish(ticket, "SORTING")
        ordered = await self._sorter.sort(entry.records)

        if not self._is_current(ticket):
            logger.debug("stale sort result discarded: key=%s", key.cache_key())
            return

        self._displayed = ordered
        self._sorting = False
        self._publish(ticket, "READY")

    async def _fetch_shared(self, key: PageQuery) -> CacheEntry:
        cache_key = key.cache_key()
        task = self._inflight.get(cache_key)
        if task is None:
            task = asyncio.get_running_loop().create_task(self._fetch_entry(key))
            self._inflight[cache_key] = task
            task.add_done_callback(lambda _task: self._inflight.pop(cache_key, None))
        else:
            logger.debug("joining in-flight fetch: key=%s", cache_key)
        return await task

    async def _fetch_entry(self, key: PageQuery) -> CacheEntry:
        outcome = await self._fetcher.fetch(key.page, self.page_size, key.query)
        if outcome.error is not None:
            raise outcome.error
        if outcome.result is None:
            raise FetchError(f"조회 결과가 비어 있습니다: key={key.cache_key()}")

        entry = CacheEntry(
            records=outcome.result.records,
            total_pages=total_pages_for(outcome.result.total_count, self.page_size),
        )
        self._cache.put(key, entry)
        return entry

    def _publish(self, ticket: _Ticket, phase: ViewPhase) -> None:
        if not self._is_current(ticket):
            return
        self._phase = phase
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)


def _running_loop() -> asyncio.AbstractEventLoop:
    try:
        return asyncio.get_running_loop()
    except RuntimeError as exc:
        raise ConfigurationError("실행 중인 이벤트 루프가 없어 로드를 예약할 수 없습니다") from exc
