"""
대시보드 데이터 모델
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class PredictionInput:
    """예측 요청 입력값 (전송 후 변경 불가)"""
    shortwave_radiation_backwards_sfc: float
    azimuth: float
    zenith: float
    angle_of_incidence: float
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_payload(self) -> Dict[str, Any]:
        """요청 본문 생성 (값이 없는 선택 항목은 제외)"""
        payload = {}
        for key in ('location', 'latitude', 'longitude'):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value

        payload['shortwave_radiation_backwards_sfc'] = self.shortwave_radiation_backwards_sfc
        payload['azimuth'] = self.azimuth
        payload['zenith'] = self.zenith
        payload['angle_of_incidence'] = self.angle_of_incidence
        return payload


@dataclass(frozen=True)
class PredictionResponse:
    """예측 서버 응답"""
    latitude: float
    longitude: float
    predicted_generated_kw: float

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'PredictionResponse':
        return cls(
            latitude=data['latitude'],
            longitude=data['longitude'],
            predicted_generated_kw=data['predicted_generated_kw'],
        )


@dataclass(frozen=True)
class OptimalConfiguration:
    """위도 기반 최적 설치 각도"""
    optimal_azimuth: float
    optimal_tilt: float
    predicted_increase: float


@dataclass(frozen=True)
class DashboardData:
    """
    대시보드 전체 상태

    갱신할 때마다 새 레코드로 교체되며, 구독자는 받은 레코드를 수정하지 않는다.
    """
    current_prediction: Optional[PredictionResponse] = None
    optimal_config: Optional[OptimalConfiguration] = None
    historical_data: Tuple[Dict[str, Any], ...] = field(default_factory=tuple)
    loading: bool = False
    error: Optional[str] = None

    @classmethod
    def initial(cls) -> 'DashboardData':
        """초기 상태 (모두 비어 있음)"""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 딕셔너리"""
        return {
            'current_prediction': asdict(self.current_prediction) if self.current_prediction else None,
            'optimal_config': asdict(self.optimal_config) if self.optimal_config else None,
            'historical_data': [dict(row) for row in self.historical_data],
            'loading': self.loading,
            'error': self.error,
        }
