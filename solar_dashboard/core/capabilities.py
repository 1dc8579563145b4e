"""
외부 기능 인터페이스
위치 조회와 파일 저장처럼 실행 환경에 따라 달라지는 동작을 분리
"""
import math
from abc import ABC, abstractmethod
from typing import Tuple


class LocationUnavailable(Exception):
    """현재 위치를 가져올 수 없음"""


class CoordinateProvider(ABC):
    """현재 위치 좌표 제공자"""

    @abstractmethod
    def get_current_position(self) -> Tuple[float, float]:
        """(위도, 경도) 반환. 실패시 LocationUnavailable 발생"""


class FileSaver(ABC):
    """내보낸 파일 저장 처리자"""

    @abstractmethod
    def save(self, filename: str, content: bytes, mimetype: str):
        pass


class StaticCoordinateProvider(CoordinateProvider):
    """요청으로 전달된 좌표를 그대로 제공"""

    def __init__(self, latitude=None, longitude=None):
        self.latitude = latitude
        self.longitude = longitude

    def get_current_position(self):
        if self.latitude is None or self.longitude is None:
            raise LocationUnavailable('Coordinates were not provided')
        try:
            lat, lon = float(self.latitude), float(self.longitude)
        except (TypeError, ValueError) as e:
            raise LocationUnavailable(str(e)) from e

        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise LocationUnavailable('Coordinates must be finite numbers')
        return lat, lon
