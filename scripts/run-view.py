"""
목적:
- 원격 자산 엔드포인트에서 한 페이지를 읽어 정렬된 표로 출력하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일/인자를 직접 읽지 않는다. 이 스크립트가 설정 객체를 만들어 주입한다.
- 첫 페이지 로드 -> (선택) 검색어 적용 -> (선택) 페이지 이동 -> 표 출력 흐름을 데모한다.
- 같은 페이지를 두 번 요청하면 두 번째는 캐시에서 응답한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/asset_view/config/models.py
- src_py/asset_view/view/coordinator.py
- src_py/asset_view/view/presenter.py
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from asset_view import FetcherConfig, SorterConfig, ViewConfig, ViewCoordinator, render_text


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Asset View 드라이버")
    parser.add_argument("--base-url", default="http://localhost:8080", help="자산 서비스 기본 URL")
    parser.add_argument("--page", type=int, default=1, help="출력할 페이지 번호")
    parser.add_argument("--query", default="", help="호스트 검색어")
    parser.add_argument("--limit", type=int, default=10, help="페이지당 행 수")
    parser.add_argument("--sort-delay-ms", type=int, default=1_000, help="정렬 시뮬레이션 지연(ms)")
    parser.add_argument("--timeout-ms", type=int, default=None, help="HTTP 타임아웃(ms, 기본: 무제한)")
    parser.add_argument("--log-level", default="INFO", help="로그 레벨 (DEBUG/INFO/WARNING)")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> ViewConfig:
    return ViewConfig(
        fetcher=FetcherConfig(
            base_url=args.base_url,
            page_size=args.limit,
            timeout_ms=args.timeout_ms,
        ),
        sorter=SorterConfig(delay_ms=args.sort_delay_ms),
    )


async def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    coordinator = ViewCoordinator(build_config(args))
    try:
        await coordinator.refresh()

        if args.query:
            coordinator.set_query(args.query)
            await coordinator.wait_until_settled()

        if args.page != coordinator.state.current_page:
            if not coordinator.request_page(args.page):
                logging.warning(
                    "page %s is out of range (total_pages=%s)",
                    args.page,
                    coordinator.state.total_pages,
                )
            await coordinator.wait_until_settled()

        state = coordinator.state
        print(render_text(state))
        if state.phase == "ERROR":
            print(f"[error] {state.last_error}", file=sys.stderr)
            return 1
    finally:
        await coordinator.aclose()

    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
