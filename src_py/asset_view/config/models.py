"""
목적:
- Asset View 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 원격 엔드포인트/페이지 크기/정렬 지연 값을 단일 모델로 관리한다.
- 라이브러리는 환경 변수를 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.
- 요청 타임아웃은 기본값이 없다(무제한 대기). 필요 시 호출자가 명시한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-view.py
- src_py/asset_view/fetch/fetcher.py
- src_py/asset_view/sort/sorter.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class FetcherConfig(BaseModel):
    """원격 자산 조회 설정 모델."""

    base_url: str = Field(default="http://localhost:8080", min_length=1)
    endpoint: str = Field(default="/assets", min_length=1)
    page_size: int = Field(default=10, ge=1)
    count_header: str = Field(default="X-Total-Count", min_length=1)
    query_param: str = Field(default="host", min_length=1)
    timeout_ms: int | None = Field(default=None, ge=1)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("endpoint는 '/'로 시작해야 합니다")
        return value

    def to_url(self) -> str:
        """조회 대상 절대 URL을 생성한다."""
        return f"{self.base_url.rstrip('/')}{self.endpoint}"

    def timeout_seconds(self) -> float | None:
        """httpx 전달용 타임아웃(초)을 반환한다."""
        if self.timeout_ms is None:
            return None
        return self.timeout_ms / 1000.0


class SorterConfig(BaseModel):
    """정렬 지연(시뮬레이션 비용) 설정 모델."""

    delay_ms: int = Field(default=1_000, ge=0)


class ViewConfig(BaseModel):
    """뷰 조정자 설정 모델."""

    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    sorter: SorterConfig = Field(default_factory=SorterConfig)
