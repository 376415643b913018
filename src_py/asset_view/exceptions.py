"""
목적:
- Asset View 계층의 예외 타입을 표준화한다.

설명:
- 설정 오류와 원격 조회 오류를 명시적으로 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.
- `FetchError`는 조회 경계에서 반환값으로 전달되며, 경계 밖으로 던져지지 않는다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/asset_view/fetch/fetcher.py
- src_py/asset_view/view/coordinator.py
"""


class AssetViewError(Exception):
    """Asset View 공통 베이스 예외."""


class ConfigurationError(AssetViewError):
    """설정값이나 호출 인자가 유효하지 않을 때 발생한다."""


class FetchError(AssetViewError):
    """원격 자산 조회가 네트워크/상태 코드/본문 파싱 단계에서 실패했을 때 사용한다."""
