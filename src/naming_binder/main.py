"""
NamingBinder 진입점

설정 로드, 디렉터리/프록시 팩토리/배포 관리자 배선, FastAPI 서버 시작을 담당합니다.
"""

from __future__ import annotations

import os
import signal
import sys
from pathlib import Path

from naming_binder.application.binder.observers import LoggingObserver
from naming_binder.application.lifecycle.manager import DeploymentManager
from naming_binder.common.errors import ConfigError, ErrorCode
from naming_binder.common.logging import configure_logging, get_logger
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.infrastructure.proxy.factory import CachingProxyFactory
from naming_binder.interface.api.app import create_app
from naming_binder.interface.api.dependencies import AppContext, set_app_context
from naming_binder.interface.config.loader import ConfigLoader

logger = get_logger(__name__)

# 전역 컴포넌트 (종료 시 정리용)
_deployment_manager: DeploymentManager | None = None


def _str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "y", "on"}


def initialize_components(
    config_path: str | Path | None = None,
    activate: bool = True,
) -> tuple[DeploymentManager, NamingDirectory, ConfigLoader]:
    """
    모든 컴포넌트를 초기화하고 배선합니다.

    Args:
        config_path: 설정 파일 경로 (None이면 deployment.json)
        activate: 등록 직후 모든 컴포넌트를 활성화할지 여부

    Returns:
        (deployment_manager, directory, config_loader) 튜플
    """
    # 1. 설정 로드
    loader = ConfigLoader()
    deployment_config = loader.load_from_file(config_path or "deployment.json")

    # 교차 검증
    is_valid, errors = loader.validate(deployment_config)
    if not is_valid:
        logger.error("설정 검증 실패", errors=errors)
        raise ConfigError(
            ErrorCode.CONFIG_INVALID,
            f"설정 검증 실패: {errors}",
            config_path=str(config_path) if config_path else None,
            details={"errors": errors},
        )

    observability = deployment_config.observability
    configure_logging(level=observability.log_level.upper(), json_output=observability.log_json)

    # 2. 디렉터리 + 디스크립션 그래프
    directory = NamingDirectory()
    components = loader.to_components(deployment_config, directory)

    # 3. 배포 관리자
    manager = DeploymentManager(
        global_context=directory.global_context,
        proxy_factory=CachingProxyFactory(),
    )
    if observability.log_writes:
        manager.add_observer(LoggingObserver())
    manager.register_all(components)

    logger.info("설정 로드 완료", component_count=len(components))

    # 4. 초기 활성화
    if activate:
        manager.activate_all()
        logger.info(
            "초기 활성화 완료",
            active=len(manager.get_active_states()),
            bindings=directory.total_bindings(),
        )

    logger.info("컴포넌트 초기화 완료")
    return manager, directory, loader


def shutdown_components() -> None:
    """활성 컴포넌트를 모두 비활성화합니다."""
    global _deployment_manager

    logger.info("컴포넌트 종료 시작")

    if _deployment_manager:
        try:
            _deployment_manager.deactivate_all()
        except Exception as e:
            logger.error(f"컴포넌트 비활성화 오류: {e}", error=str(e))
        _deployment_manager = None

    logger.info("컴포넌트 종료 완료")


def setup_signal_handlers() -> None:
    """시그널 핸들러를 설정합니다."""
    def signal_handler(signum, frame):
        logger.info(f"시그널 수신: {signum}")
        shutdown_components()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def main() -> None:
    """메인 진입점."""
    import uvicorn

    # 시그널 핸들러 설정
    setup_signal_handlers()

    # 설정 파일 경로 (환경변수 또는 기본값)
    config_path = os.getenv("CONFIG_PATH", "deployment.json")
    activate_on_start = _str_to_bool(os.getenv("ACTIVATE_ON_START"), default=True)

    try:
        # 컴포넌트 초기화
        global _deployment_manager
        _deployment_manager, directory, _ = initialize_components(
            config_path,
            activate=activate_on_start,
        )

        # FastAPI 앱 생성
        allowed_origins = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else None
        app = create_app(allowed_origins=allowed_origins)

        # DI 컨텍스트 설정
        set_app_context(
            app,
            AppContext(
                deployment_manager=_deployment_manager,
                directory=directory,
            ),
        )

        # 서버 시작
        host = os.getenv("HOST", "0.0.0.0")
        port = int(os.getenv("PORT", "8000"))

        logger.info(f"서버 시작: http://{host}:{port}")

        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level="info",
        )

    except KeyboardInterrupt:
        logger.info("사용자 중단")
    except Exception as e:
        logger.exception("초기화 오류", error=str(e))
        sys.exit(1)
    finally:
        shutdown_components()


if __name__ == "__main__":
    main()
