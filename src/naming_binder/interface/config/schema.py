"""
설정 스키마 (Pydantic v2)

deployment.json을 검증하기 위한 스키마를 정의합니다.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Pydantic 모델은 Interface Layer에서만 외부 라이브러리에 의존합니다.

# 이름 경로에서 구분자로 쓰이는 문자
_RESERVED_CHARS = ("/", "!")


def _validate_segment(kind: str, value: str) -> str:
    if not value:
        raise ValueError(f"{kind} 이름은 비워둘 수 없습니다")
    for char in _RESERVED_CHARS:
        if char in value:
            raise ValueError(f"{kind} 이름에 '{char}' 문자를 사용할 수 없습니다: {value}")
    return value


def _duplicates(names: list[str]) -> list[str]:
    seen: set[str] = set()
    duplicated: list[str] = []
    for name in names:
        if name in seen and name not in duplicated:
            duplicated.append(name)
        seen.add(name)
    return duplicated


class ComponentConfig(BaseModel):
    """컴포넌트 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    name: str = Field(..., description="컴포넌트 이름 (모듈 내 고유)")
    business_locals: list[str] | None = Field(None, description="비즈니스 로컬 인터페이스")
    business_remotes: list[str] | None = Field(None, description="비즈니스 원격 인터페이스")
    home: str | None = Field(None, description="홈 인터페이스")
    local_home: str | None = Field(None, description="로컬 홈 인터페이스")
    local_bean: bool = Field(False, description="no-interface 로컬 뷰 노출 여부")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _validate_segment("컴포넌트", value)

    @field_validator("business_locals", "business_remotes")
    @classmethod
    def validate_interfaces(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and any(not iface for iface in value):
            raise ValueError("인터페이스 식별자는 비워둘 수 없습니다")
        return value

    @field_validator("home", "local_home")
    @classmethod
    def validate_home(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise ValueError("홈 인터페이스 식별자는 비워둘 수 없습니다")
        return value


class ModuleConfig(BaseModel):
    """모듈 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    name: str = Field(..., description="모듈 이름 (예: orders.jar)")
    components: list[ComponentConfig] = Field(default_factory=list, description="컴포넌트 목록")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _validate_segment("모듈", value)

    @model_validator(mode="after")
    def validate_uniqueness(self) -> "ModuleConfig":
        duplicated = _duplicates([c.name for c in self.components])
        if duplicated:
            raise ValueError(f"모듈 {self.name}: 컴포넌트 이름이 중복됩니다: {duplicated}")
        return self


class ApplicationConfig(BaseModel):
    """애플리케이션 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    name: str = Field(..., description="애플리케이션 이름")
    multi_module: bool = Field(False, description="멀티 모듈 아카이브(.ear) 여부")
    modules: list[ModuleConfig] = Field(default_factory=list, description="모듈 목록")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _validate_segment("애플리케이션", value)

    @model_validator(mode="after")
    def validate_uniqueness(self) -> "ApplicationConfig":
        duplicated = _duplicates([m.name for m in self.modules])
        if duplicated:
            raise ValueError(f"애플리케이션 {self.name}: 모듈 이름이 중복됩니다: {duplicated}")
        return self


class ObservabilityConfig(BaseModel):
    """관측 설정."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    log_level: str = Field("INFO", description="로그 레벨")
    log_json: bool = Field(False, description="JSON 로그 출력 여부")
    log_writes: bool = Field(True, description="디렉터리 쓰기 로깅 관찰자 사용 여부")


class DeploymentConfig(BaseModel):
    """배포 전체 설정 스키마."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    applications: list[ApplicationConfig] = Field(
        default_factory=list,
        description="애플리케이션 목록",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="관측 설정",
    )

    @model_validator(mode="after")
    def validate_uniqueness(self) -> "DeploymentConfig":
        duplicated = _duplicates([a.name for a in self.applications])
        if duplicated:
            raise ValueError(f"애플리케이션 이름이 중복됩니다: {duplicated}")
        return self
