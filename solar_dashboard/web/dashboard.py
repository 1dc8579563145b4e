"""
대시보드 화면 로직
입력 검증, 예측 요청, 위치 조회, 내보내기 등 화면 동작을 담당
"""
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from solar_dashboard.config import get_config
from solar_dashboard.core.capabilities import CoordinateProvider, FileSaver, LocationUnavailable
from solar_dashboard.core.models import DashboardData, PredictionInput, PredictionResponse
from solar_dashboard.core.prediction_api import PredictionError, PredictionGateway

config = get_config()

LOCATION_UNAVAILABLE_MESSAGE = 'Unable to retrieve location. Please enter coordinates manually.'

FIELD_LABELS = {
    'location': 'Location',
    'latitude': 'Latitude',
    'longitude': 'Longitude',
    'shortwave_radiation_backwards_sfc': 'Solar Irradiance',
    'azimuth': 'Azimuth Angle',
    'zenith': 'Zenith Angle',
    'angle_of_incidence': 'Angle of Incidence',
}

# 검증 프로파일별 (천정각, 입사각) 허용 범위
VALIDATION_PROFILES = {
    'extended': {'zenith': (0, 360), 'angle_of_incidence': (0, 180)},
    'strict': {'zenith': (0, 90), 'angle_of_incidence': (0, 90)},
}


class ValidationError(Exception):
    """입력값 검증 실패 (필드별 오류 메시지 포함)"""

    def __init__(self, errors: Dict[str, str]):
        super().__init__('; '.join(errors.values()))
        self.errors = errors


def _to_number(value) -> Optional[float]:
    """폼 입력값을 숫자로 변환 (빈 값, 숫자가 아닌 값, NaN/무한대는 None)"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() and '.' not in text else number


class DashboardController:
    """대시보드 화면 동작 클래스"""

    def __init__(self, gateway: PredictionGateway, settings=None):
        self.config = settings or config
        self.gateway = gateway
        self.validation_profile = self.config.VALIDATION_PROFILE
        if self.validation_profile not in VALIDATION_PROFILES:
            raise ValueError(f'Unknown validation profile: {self.validation_profile}')

        self.form = self.create_form()
        self.dashboard_data = DashboardData.initial()
        self._unsubscribe = self.gateway.subscribe(self._on_data_changed)
        self.load_default_location()

    def _on_data_changed(self, data: DashboardData):
        self.dashboard_data = data

    def close(self):
        """상태 구독 해제"""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ---------------- 입력 폼 ----------------

    def create_form(self) -> Dict[str, Any]:
        """입력 폼 기본값"""
        return {
            'location': '',
            'latitude': None,
            'longitude': None,
            'shortwave_radiation_backwards_sfc': self.config.DEFAULT_IRRADIANCE,
            'azimuth': self.config.DEFAULT_AZIMUTH,
            'zenith': self.config.DEFAULT_ZENITH,
            'angle_of_incidence': self.config.DEFAULT_ANGLE_OF_INCIDENCE,
        }

    def load_default_location(self):
        lat, lon = self.config.DEFAULT_LOCATION
        self.form.update({
            'location': self.config.DEFAULT_LOCATION_NAME,
            'latitude': lat,
            'longitude': lon,
        })

    @property
    def field_rules(self) -> Dict[str, Dict[str, Any]]:
        """필드별 검증 규칙"""
        bounds = VALIDATION_PROFILES[self.validation_profile]
        return {
            'location': {'min_length': 2},
            'latitude': {'min': -90, 'max': 90},
            'longitude': {'min': -180, 'max': 180},
            'shortwave_radiation_backwards_sfc': {'required': True, 'min': 0, 'max': 1400},
            'azimuth': {'required': True, 'min': 0, 'max': 360},
            'zenith': {'required': True, 'min': bounds['zenith'][0], 'max': bounds['zenith'][1]},
            'angle_of_incidence': {
                'required': True,
                'min': bounds['angle_of_incidence'][0],
                'max': bounds['angle_of_incidence'][1]
            },
        }

    def validate(self, form: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, str]]:
        """
        입력값 검증

        Args:
            form: 필드명 -> 입력값

        Returns:
            (정리된 값, 필드별 오류 메시지)
        """
        values = {}
        errors = {}

        for name, rules in self.field_rules.items():
            label = FIELD_LABELS[name]
            raw = form.get(name)

            if name == 'location':
                # 빈 값은 통과, 길이는 입력 그대로 계산
                text = raw if isinstance(raw, str) else ''
                if text and len(text) < rules['min_length']:
                    errors[name] = f"{label} must be at least {rules['min_length']} characters"
                values[name] = text or None
                continue

            value = _to_number(raw)
            values[name] = value

            if value is None:
                if rules.get('required'):
                    errors[name] = f'{label} is required'
                continue

            if value < rules['min']:
                errors[name] = f"{label} must be at least {rules['min']}"
            elif value > rules['max']:
                errors[name] = f"{label} must be at most {rules['max']}"

        return values, errors

    def get_form_field_error(self, form: Dict[str, Any], field_name: str) -> str:
        """단일 필드 오류 메시지 (오류가 없으면 빈 문자열)"""
        _, errors = self.validate(form)
        return errors.get(field_name, '')

    # ---------------- 동작 ----------------

    def submit(self, form: Optional[Dict[str, Any]] = None) -> PredictionResponse:
        """
        입력값을 검증하고 예측 요청

        예측 성공시 응답 위도로 최적 각도를 계산해 상태에 반영한다.
        """
        if form is not None:
            self.form.update({key: form[key] for key in FIELD_LABELS if key in form})

        values, errors = self.validate(self.form)
        if errors:
            raise ValidationError(errors)

        prediction_input = PredictionInput(**values)

        try:
            response = self.gateway.predict(prediction_input)
        except PredictionError as e:
            print(f"❌ Prediction failed: {e}")
            raise

        optimal_config = self.gateway.calculate_optimal_configuration(response.latitude)
        self.gateway.apply_update(optimal_config=optimal_config)

        if self.config.RECORD_HISTORY:
            self._record_history(prediction_input, response)

        print(f"✅ Prediction received: {response.predicted_generated_kw} kW")
        return response

    def _record_history(self, prediction_input: PredictionInput, response: PredictionResponse):
        """예측 결과를 이력에 추가"""
        row = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'location': prediction_input.location,
            'latitude': response.latitude,
            'longitude': response.longitude,
            'shortwave_radiation_backwards_sfc': prediction_input.shortwave_radiation_backwards_sfc,
            'azimuth': prediction_input.azimuth,
            'zenith': prediction_input.zenith,
            'angle_of_incidence': prediction_input.angle_of_incidence,
            'predicted_generated_kw': response.predicted_generated_kw,
        }
        history = self.gateway.value.historical_data + (row,)
        self.gateway.apply_update(historical_data=history)

    def use_current_location(self, provider: CoordinateProvider) -> Optional[str]:
        """
        현재 위치를 입력 폼에 반영

        Returns:
            실패시 사용자 안내 문구, 성공시 None
        """
        try:
            lat, lon = provider.get_current_position()
        except LocationUnavailable as e:
            print(f"⚠️ Geolocation error: {e}")
            return LOCATION_UNAVAILABLE_MESSAGE

        self.form.update({
            'latitude': round(lat, 4),
            'longitude': round(lon, 4),
            'location': '',
        })
        return None

    def reset_form(self):
        """
        입력 폼과 대시보드 상태 초기화

        모든 입력값을 비우고 기본 위치만 다시 채운다. 측정값은 사용자가 다시 입력해야 한다.
        """
        self.form = {name: None for name in FIELD_LABELS}
        self.load_default_location()
        self.gateway.clear_data()

    def export(self, file_format: str, saver: FileSaver):
        """현재 상태를 파일로 내보내기"""
        content = self.gateway.export_data(file_format)
        return saver.save(
            self.gateway.export_filename(file_format),
            content,
            self.gateway.export_mimetype(file_format)
        )

    # ---------------- 표시 문구 ----------------

    def prediction_summary(self) -> str:
        prediction = self.dashboard_data.current_prediction
        if not prediction:
            return ''

        return (
            'Based on current conditions, your solar panels are expected to generate '
            f'{prediction.predicted_generated_kw:.2f} kW of power.'
        )

    def optimal_configuration_text(self) -> str:
        optimal = self.dashboard_data.optimal_config
        if not optimal:
            return ''

        return (
            f'For optimal performance, set your panels to {_format_number(optimal.optimal_tilt)}° tilt '
            f'and {_format_number(optimal.optimal_azimuth)}° azimuth for up to '
            f'{_format_number(optimal.predicted_increase)}% increased efficiency.'
        )


def _format_number(value) -> str:
    """정수값은 소수점 없이 표시"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
