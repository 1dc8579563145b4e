"""
태양광 발전량 예측 대시보드

- core: 예측 서버 연동, 대시보드 상태, 최적 각도 추천
- web: Flask 웹 애플리케이션
- visualization: 차트 생성
- utils: 파일 유틸리티
"""

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"
