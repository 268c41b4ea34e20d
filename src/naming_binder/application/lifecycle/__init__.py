"""
배포 생명주기 모듈

컴포넌트 활성화/비활성화와 그에 따른 바인딩/언바인딩을 담당합니다.
"""

from naming_binder.application.lifecycle.manager import DeploymentManager

__all__ = ["DeploymentManager"]
