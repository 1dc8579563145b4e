"""
visualization 모듈 - 데이터 시각화 및 차트 생성

이 모듈은 다음 컴포넌트들을 포함합니다:
- chart_generator: 천정각-발전량 산점도 생성
- scatter_data: 산점도 샘플 데이터와 점 색상/크기 규칙
"""

from .chart_generator import ChartGenerator
from .scatter_data import SCATTER_PLOT_DATA, point_color, point_size

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"

# 기본 차트 생성기 인스턴스
default_chart_generator = ChartGenerator()

__all__ = [
    'ChartGenerator',
    'default_chart_generator',
    'SCATTER_PLOT_DATA',
    'point_color',
    'point_size'
]
