"""
네이밍 디렉터리 조회 API
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from naming_binder.domain.models.operation import NamingScope
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.interface.api.dependencies import get_directory

router = APIRouter(prefix="/api/directory", tags=["directory"])


class DirectoryListing(BaseModel):
    scope: str
    application: str | None = None
    module: str | None = None
    names: list[str]


class DirectoryResponse(BaseModel):
    success: bool = True
    data: DirectoryListing


@router.get("")
async def get_snapshot(
    directory: NamingDirectory = Depends(get_directory),
) -> dict[str, Any]:
    """모든 스코프의 바인딩 스냅샷"""
    return {"success": True, "data": directory.snapshot()}


@router.get("/{scope}", response_model=DirectoryResponse)
async def list_scope(
    scope: NamingScope,
    application: str | None = Query(None, description="application/module 스코프 대상 애플리케이션"),
    module: str | None = Query(None, description="module 스코프 대상 모듈"),
    directory: NamingDirectory = Depends(get_directory),
) -> DirectoryResponse:
    """
    스코프에 바인딩된 이름 목록.

    해당 컨텍스트가 아직 만들어지지 않았으면 빈 목록을 반환합니다.
    """
    if scope is not NamingScope.GLOBAL and not application:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{scope.value} 스코프에는 application 쿼리가 필요합니다",
        )
    if scope is NamingScope.MODULE and not module:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="module 스코프에는 module 쿼리가 필요합니다",
        )

    context = directory.find_context(scope, application=application, module=module)
    names = context.list_names() if context is not None else []
    return DirectoryResponse(
        data=DirectoryListing(
            scope=scope.value,
            application=application if scope is not NamingScope.GLOBAL else None,
            module=module if scope is NamingScope.MODULE else None,
            names=names,
        )
    )
