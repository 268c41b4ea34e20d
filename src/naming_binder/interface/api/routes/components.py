"""
컴포넌트 배포 제어 API
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from naming_binder.application.lifecycle.manager import DeploymentManager
from naming_binder.common.errors import ComponentError, ErrorCode
from naming_binder.common.logging import get_logger
from naming_binder.domain.models.deployment import ComponentState
from naming_binder.domain.models.view import enumerate_views
from naming_binder.interface.api.dependencies import get_deployment_manager

logger = get_logger(__name__)

router = APIRouter(prefix="/api/components", tags=["components"])


# === DTO 정의 ===


class ComponentSummary(BaseModel):
    key: str
    status: str
    view_count: int
    bound_count: int
    last_error: str | None = None


class ComponentListResponse(BaseModel):
    success: bool = True
    data: list[ComponentSummary]


class ComponentDetailResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


class ComponentControlResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


# === 유틸 ===


def _key(app: str, module: str, component: str) -> str:
    return f"{app}/{module}/{component}"


def _state_to_summary(state: ComponentState) -> ComponentSummary:
    return ComponentSummary(
        key=state.key,
        status=state.status.value,
        view_count=len(enumerate_views(state.component)),
        bound_count=state.bound_names,
        last_error=state.last_error,
    )


def _require_state(manager: DeploymentManager, key: str) -> ComponentState:
    state = manager.get_state(key)
    if state is None:
        raise ComponentError(
            ErrorCode.COMPONENT_NOT_FOUND,
            f"컴포넌트를 찾을 수 없습니다: {key}",
            component_key=key,
        )
    return state


# === 엔드포인트 ===


@router.get("", response_model=ComponentListResponse)
async def list_components(
    manager: DeploymentManager = Depends(get_deployment_manager),
) -> ComponentListResponse:
    """등록된 컴포넌트 목록"""
    return ComponentListResponse(
        data=[_state_to_summary(state) for state in manager.list_states()],
    )


@router.get("/{app}/{module}/{component}", response_model=ComponentDetailResponse)
async def get_component(
    app: str,
    module: str,
    component: str,
    manager: DeploymentManager = Depends(get_deployment_manager),
) -> ComponentDetailResponse:
    """컴포넌트 상태와 바인딩될 이름 미리보기"""
    key = _key(app, module, component)
    state = _require_state(manager, key)
    data = state.to_dict()
    data["views"] = [view.to_dict() for view in enumerate_views(state.component)]
    data["planned_names"] = manager.preview(key)
    return ComponentDetailResponse(data=data)


@router.post("/{app}/{module}/{component}/activate", response_model=ComponentControlResponse)
async def activate_component(
    app: str,
    module: str,
    component: str,
    manager: DeploymentManager = Depends(get_deployment_manager),
) -> ComponentControlResponse:
    """컴포넌트 활성화 (모든 뷰 바인딩)"""
    key = _key(app, module, component)
    state = manager.activate(key)
    logger.info(f"API 활성화 요청 처리: {key}", component_key=key)
    return ComponentControlResponse(data=state.to_dict())


@router.post("/{app}/{module}/{component}/deactivate", response_model=ComponentControlResponse)
async def deactivate_component(
    app: str,
    module: str,
    component: str,
    manager: DeploymentManager = Depends(get_deployment_manager),
) -> ComponentControlResponse:
    """컴포넌트 비활성화 (모든 뷰 언바인딩, FAILED면 남은 이름만 정리)"""
    key = _key(app, module, component)
    state = manager.deactivate(key)
    logger.info(f"API 비활성화 요청 처리: {key}", component_key=key)
    return ComponentControlResponse(data=state.to_dict())
