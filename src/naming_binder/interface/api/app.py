"""
FastAPI 애플리케이션 팩토리

Interface Layer에서만 FastAPI에 의존합니다.
예외 핸들러, CORS, 라우터 등록을 담당합니다.
"""

from __future__ import annotations

from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from naming_binder.common.errors import BinderError
from naming_binder.common.logging import get_logger
from naming_binder.interface.api.routes import components, directory, health

logger = get_logger(__name__)


def create_app(allowed_origins: Iterable[str] | None = None) -> FastAPI:
    """
    FastAPI 애플리케이션을 생성합니다.

    Args:
        allowed_origins: CORS 허용 오리진 목록
    """
    app = FastAPI(title="NamingBinder API", version="0.1.0")

    # CORS
    origins = list(allowed_origins) if allowed_origins else []
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # 예외 핸들러 등록
    @app.exception_handler(BinderError)
    async def handle_binder_error(_: Request, exc: BinderError) -> JSONResponse:
        """BinderError → JSON 응답 매핑."""
        logger.error(
            "BinderError 발생",
            code=exc.code.value,
            error_msg=exc.message,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content={"success": False, "code": exc.code.value, "message": exc.message},
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(_: Request, exc: ValidationError) -> JSONResponse:
        """Pydantic ValidationError → 422 응답."""
        logger.error("검증 오류", errors=exc.errors())
        error_msg = "입력 데이터 검증 실패"
        if exc.errors():
            first_error = exc.errors()[0]
            error_msg = f"{first_error.get('loc', [''])}: {first_error.get('msg', '검증 실패')}"
        return JSONResponse(
            status_code=422,
            content={"success": False, "message": error_msg},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        """알 수 없는 예외 → 500 응답."""
        logger.error("알 수 없는 오류", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "서버 오류가 발생했습니다"},
        )

    # 라우터 등록
    app.include_router(health.router)
    app.include_router(components.router)
    app.include_router(directory.router)

    return app
