"""
태양광 모듈 설치 각도 추천 모듈
"""
from datetime import datetime
from typing import Optional

from solar_dashboard.config import get_config
from solar_dashboard.core.models import OptimalConfiguration

config = get_config()

class ConfigurationAdvisor:
    """위도 기반 최적 경사각/방위각 추천 클래스"""

    def __init__(self, settings=None):
        self.config = settings or config

    def calculate_optimal_configuration(
        self,
        latitude: float,
        month: Optional[int] = None
    ) -> OptimalConfiguration:
        """
        경험적 공식을 사용한 최적 설치 각도 계산

        Args:
            latitude: 위도 (북반구 양수)
            month: 월 (1~12, 기본값은 이번 달). 계절 보정용으로 예약되어 있으며 아직 사용하지 않음

        Returns:
            OptimalConfiguration
        """
        if month is None:
            month = datetime.now().month

        # 위도 기반 경사각 (위도 - 10°, 0~60° 범위로 제한)
        optimal_tilt = abs(latitude) - self.config.TILT_OFFSET
        optimal_tilt = max(self.config.MIN_TILT, min(self.config.MAX_TILT, optimal_tilt))

        # 북반구는 남향, 남반구는 북향
        optimal_azimuth = 180 if latitude >= 0 else 0

        return OptimalConfiguration(
            optimal_azimuth=optimal_azimuth,
            optimal_tilt=optimal_tilt,
            predicted_increase=self.config.PREDICTED_INCREASE
        )

default_advisor = ConfigurationAdvisor()

def calculate_optimal_configuration(latitude: float, month: Optional[int] = None) -> OptimalConfiguration:
    """최적 설치 각도 계산 (편의 함수)"""
    return default_advisor.calculate_optimal_configuration(latitude, month)
