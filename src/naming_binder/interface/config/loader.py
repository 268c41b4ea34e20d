"""
설정 로더

deployment.json을 로드하고 Pydantic 스키마로 검증합니다.
검증된 설정을 도메인 디스크립션 그래프(Application → Module → Component)로 변환합니다.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from naming_binder.common.errors import ConfigError, ErrorCode
from naming_binder.common.logging import get_logger
from naming_binder.domain.models.component import (
    Application,
    ComponentDescription,
    Module,
)
from naming_binder.infrastructure.naming.directory import NamingDirectory

from .schema import ComponentConfig, DeploymentConfig

logger = get_logger(__name__)


class ConfigLoader:
    """deployment.json 로딩 및 변환을 담당합니다."""

    def __init__(self, default_path: str = "deployment.json") -> None:
        self._default_path = Path(default_path)

    def load_from_file(self, path: str | Path | None = None) -> DeploymentConfig:
        """파일에서 설정을 로드하고 검증합니다."""
        target = Path(path) if path else self._default_path

        if not target.exists():
            raise ConfigError(
                ErrorCode.CONFIG_NOT_FOUND,
                f"설정 파일을 찾을 수 없습니다: {target}",
                config_path=str(target),
            )

        try:
            content = target.read_text(encoding="utf-8")
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigError(
                ErrorCode.CONFIG_PARSE_ERROR,
                f"설정 파일 파싱에 실패했습니다: {e}",
                config_path=str(target),
                details={"error": str(e)},
            ) from e

        return self.load_from_dict(data, config_path=str(target))

    def load_from_dict(
        self,
        data: dict[str, Any],
        config_path: str | None = None,
    ) -> DeploymentConfig:
        """딕셔너리에서 설정을 검증합니다."""
        try:
            return DeploymentConfig.model_validate(data)
        except ValidationError as e:
            logger.error("설정 검증 실패", errors=e.errors(), config_path=config_path)
            raise ConfigError(
                ErrorCode.CONFIG_INVALID,
                "설정 검증에 실패했습니다",
                config_path=config_path,
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    def validate(self, config: DeploymentConfig) -> tuple[bool, list[str]]:
        """
        추가 교차 검증.
        - 인터페이스 식별자에 '/' 금지 (이름 경로가 깨짐)
        - 비즈니스 인터페이스 목록 내 중복 (경고, 열거 시 제거됨)
        - 뷰를 하나도 노출하지 않는 컴포넌트 (경고)
        """
        errors: list[str] = []

        for app in config.applications:
            for module in app.modules:
                for component in module.components:
                    where = f"{app.name}/{module.name}/{component.name}"

                    for iface in self._interfaces(component):
                        if "/" in iface:
                            errors.append(f"{where}: 인터페이스 식별자에 '/'를 사용할 수 없습니다: {iface}")

                    for field_name in ("business_locals", "business_remotes"):
                        values = getattr(component, field_name) or []
                        if len(values) != len(set(values)):
                            logger.warning(
                                f"{where}: {field_name}에 중복 인터페이스가 있습니다 (한 번만 바인딩됨)"
                            )

                    if not self._interfaces(component) and not component.local_bean:
                        logger.warning(f"{where}: 노출된 뷰가 없습니다")

        return (len(errors) == 0), errors

    def to_components(
        self,
        config: DeploymentConfig,
        directory: NamingDirectory,
    ) -> list[ComponentDescription]:
        """
        설정을 도메인 디스크립션 목록으로 변환합니다.

        각 Application/Module에는 directory의 해당 스코프 컨텍스트가 연결됩니다.
        """
        components: list[ComponentDescription] = []
        for app_cfg in config.applications:
            application = Application(
                name=app_cfg.name,
                multi_module=app_cfg.multi_module,
                context=directory.application_context(app_cfg.name),
            )
            for module_cfg in app_cfg.modules:
                module = Module(
                    name=module_cfg.name,
                    application=application,
                    context=directory.module_context(app_cfg.name, module_cfg.name),
                )
                for component_cfg in module_cfg.components:
                    components.append(
                        ComponentDescription(
                            name=component_cfg.name,
                            module=module,
                            business_locals=component_cfg.business_locals,
                            business_remotes=component_cfg.business_remotes,
                            home=component_cfg.home,
                            local_home=component_cfg.local_home,
                            local_bean=component_cfg.local_bean,
                        )
                    )

        logger.info(f"컴포넌트 디스크립션 {len(components)}개 생성", component_count=len(components))
        return components

    @staticmethod
    def _interfaces(component: ComponentConfig) -> list[str]:
        interfaces = [*(component.business_locals or []), *(component.business_remotes or [])]
        if component.home:
            interfaces.append(component.home)
        if component.local_home:
            interfaces.append(component.local_home)
        return interfaces
