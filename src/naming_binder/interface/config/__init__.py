"""
설정 계층

deployment.json 스키마와 로더를 제공합니다.
"""

from naming_binder.interface.config.loader import ConfigLoader
from naming_binder.interface.config.schema import (
    ApplicationConfig,
    ComponentConfig,
    DeploymentConfig,
    ModuleConfig,
    ObservabilityConfig,
)

__all__ = [
    "ConfigLoader",
    "ApplicationConfig",
    "ComponentConfig",
    "DeploymentConfig",
    "ModuleConfig",
    "ObservabilityConfig",
]
