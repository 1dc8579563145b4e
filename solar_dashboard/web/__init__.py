"""
web 모듈 - Flask 웹 애플리케이션

이 모듈은 다음 컴포넌트들을 포함합니다:
- app: Flask 애플리케이션 팩토리
- dashboard: 대시보드 화면 동작 (입력 검증, 예측 요청, 내보내기)
- routes: URL 라우팅 모듈들
"""

from .app import create_app

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"

__all__ = [
    'create_app'
]
