"""
core 모듈 - 태양광 발전량 예측 대시보드의 핵심 로직

이 모듈은 다음 컴포넌트들을 포함합니다:
- models: 예측 입력/응답 및 대시보드 상태 데이터 모델
- dashboard_state: 대시보드 상태 보관 및 구독 관리
- prediction_api: 예측 서버 연동, 상태 갱신, 데이터 내보내기
- optimization: 위도 기반 최적 각도 추천
- capabilities: 위치 조회, 파일 저장 인터페이스
"""

from .models import (
    PredictionInput,
    PredictionResponse,
    OptimalConfiguration,
    DashboardData
)
from .dashboard_state import DashboardState
from .optimization import ConfigurationAdvisor, calculate_optimal_configuration
from .prediction_api import PredictionGateway, PredictionError
from .capabilities import CoordinateProvider, FileSaver, LocationUnavailable, StaticCoordinateProvider

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"

__all__ = [
    'PredictionInput',
    'PredictionResponse',
    'OptimalConfiguration',
    'DashboardData',
    'DashboardState',
    'ConfigurationAdvisor',
    'calculate_optimal_configuration',
    'PredictionGateway',
    'PredictionError',
    'CoordinateProvider',
    'FileSaver',
    'LocationUnavailable',
    'StaticCoordinateProvider'
]
