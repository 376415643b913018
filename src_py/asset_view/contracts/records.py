"""
목적:
- 원격 자산 레코드 인터페이스 모델을 정의한다.

설명:
- 백엔드 JSON 필드명(`ID`, `Host`, `IPs` 등)을 별칭으로 유지하고,
  파이썬 측에서는 snake_case 속성으로 접근한다.
- IP/포트 목록이 누락되거나 `null`이면 빈 튜플로 정규화한다.
- 조회 이후 변경되지 않도록 모든 모델을 frozen으로 둔다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/asset_view/fetch/fetcher.py
- src_py/asset_view/sort/sorter.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IPAddress(BaseModel):
    """자산에 연결된 IP 주소 모델."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    address: str = Field(default="", alias="Address")
    signature: str | None = Field(default=None, alias="Signature")


class PortEntry(BaseModel):
    """자산에 연결된 포트 모델."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    port: int = Field(default=0, alias="Port")
    signature: str | None = Field(default=None, alias="Signature")


class AssetRecord(BaseModel):
    """단일 자산 레코드 모델. `host`가 정렬 키다."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="ID")
    host: str = Field(alias="Host")
    comment: str = Field(default="", alias="Comment")
    owner: str = Field(default="", alias="Owner")
    ips: tuple[IPAddress, ...] = Field(default=(), alias="IPs")
    ports: tuple[PortEntry, ...] = Field(default=(), alias="Ports")
    signature: str | None = Field(default=None, alias="Signature")

    @field_validator("ips", "ports", mode="before")
    @classmethod
    def normalize_missing_sequence(cls, value: object) -> object:
        if value is None:
            return ()
        return value

    @field_validator("comment", "owner", mode="before")
    @classmethod
    def normalize_missing_text(cls, value: object) -> object:
        if value is None:
            return ""
        return value

    def ip_addresses(self) -> list[str]:
        return [ip.address for ip in self.ips]

    def port_numbers(self) -> list[int]:
        return [entry.port for entry in self.ports]
