"""
네이밍 디렉터리 인터페이스

바인더가 디렉터리 서비스에 요구하는 최소 계약을 Protocol로 정의합니다.
이름은 '/'로 구분된 경로 문자열이며, 바인더는 각 스코프를 평면적인
이름 → 객체 맵으로 취급합니다.

이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NamingContext(Protocol):
    """
    스코프 하나에 대한 쓰기/삭제 계약

    구현체는 다음 예외를 발생시켜야 합니다.
    - bind: 이미 바인딩된 이름이면 NameCollisionError
    - unbind: 바인딩되지 않은 이름이면 NameNotFoundError
    - 그 외 연결/전송 오류는 DirectoryError
    """

    def bind(self, name: str, obj: Any) -> None:
        """name에 obj를 바인딩합니다."""
        ...

    def unbind(self, name: str) -> None:
        """name의 바인딩을 제거합니다."""
        ...
