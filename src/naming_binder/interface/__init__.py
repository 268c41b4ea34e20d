"""
Interface Layer

외부 세계(설정 파일, HTTP API)와 애플리케이션 계층을 연결합니다.
Pydantic, FastAPI 의존성은 이 계층에만 존재합니다.
"""
