"""
예측 서버 연동 클래스
원격 /predict 엔드포인트 호출과 대시보드 상태 갱신, 데이터 내보내기를 담당
"""
import json
import requests
from typing import Any, Dict, Optional

from solar_dashboard.config import get_config
from solar_dashboard.core.dashboard_state import DashboardState
from solar_dashboard.core.models import (
    DashboardData,
    OptimalConfiguration,
    PredictionInput,
    PredictionResponse,
)
from solar_dashboard.core.optimization import ConfigurationAdvisor

config = get_config()

EXPORT_MIMETYPES = {
    'csv': 'text/csv',
    'json': 'application/json',
}


class PredictionError(Exception):
    """예측 요청 실패 (message는 사용자에게 표시할 문구)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PredictionGateway:
    """예측 서버 호출 및 대시보드 상태 관리 클래스"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        state: Optional[DashboardState] = None,
        session=None,
        timeout: Optional[float] = None,
        advisor: Optional[ConfigurationAdvisor] = None,
        settings=None
    ):
        self.config = settings or config
        self.base_url = (base_url or self.config.PREDICTION_API_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else self.config.PREDICTION_TIMEOUT
        self.session = session if session is not None else requests.Session()
        self.dashboard_data = state if state is not None else DashboardState()
        self.advisor = advisor or ConfigurationAdvisor(self.config)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }

    @property
    def value(self) -> DashboardData:
        """현재 대시보드 상태"""
        return self.dashboard_data.value

    def subscribe(self, callback):
        """대시보드 상태 구독 (해제 함수 반환)"""
        return self.dashboard_data.subscribe(callback)

    def apply_update(self, **changes) -> DashboardData:
        """대시보드 상태 부분 갱신"""
        return self.dashboard_data.apply_update(**changes)

    def predict(self, prediction_input: PredictionInput) -> PredictionResponse:
        """
        발전량 예측 요청

        요청 직전에 loading 상태를 발행하고, 결과에 따라 상태를 갱신한 뒤
        응답을 반환한다. 실패시에는 error 필드를 먼저 갱신하고 나서
        PredictionError를 발생시킨다.

        Args:
            prediction_input: 예측 입력값

        Returns:
            PredictionResponse
        """
        self.apply_update(loading=True, error=None)

        try:
            response = self.session.post(
                f'{self.base_url}/predict',
                json=prediction_input.to_payload(),
                headers=self.headers,
                timeout=self.timeout
            )
            response.raise_for_status()
            prediction = PredictionResponse.from_json(response.json())

        except requests.exceptions.HTTPError as e:
            message = self._extract_error_message(e.response)
            self.apply_update(loading=False, error=message)
            raise PredictionError(message, e.response.status_code) from e
        except (requests.exceptions.RequestException, ValueError, KeyError, TypeError) as e:
            message = self.config.PREDICTION_FALLBACK_ERROR
            self.apply_update(loading=False, error=message)
            raise PredictionError(message) from e

        self.apply_update(current_prediction=prediction, loading=False)
        return prediction

    def _extract_error_message(self, response) -> str:
        """오류 응답 본문의 detail 값 추출 (없으면 기본 문구)"""
        try:
            body = response.json()
        except ValueError:
            return self.config.PREDICTION_FALLBACK_ERROR

        if isinstance(body, dict):
            detail = body.get('detail')
            if isinstance(detail, str) and detail:
                return detail

        return self.config.PREDICTION_FALLBACK_ERROR

    def calculate_optimal_configuration(
        self,
        latitude: float,
        month: Optional[int] = None
    ) -> OptimalConfiguration:
        """최적 설치 각도 계산 (네트워크 호출 없음)"""
        return self.advisor.calculate_optimal_configuration(latitude, month)

    def export_data(self, file_format: str) -> bytes:
        """
        현재 상태 스냅샷 내보내기

        Args:
            file_format: 'csv' 또는 'json'

        Returns:
            UTF-8 인코딩된 파일 내용
        """
        current_data = self.dashboard_data.value

        if file_format == 'csv':
            content = self._convert_to_csv(current_data.historical_data)
        elif file_format == 'json':
            content = json.dumps(current_data.to_dict(), indent=2, ensure_ascii=False)
        else:
            raise ValueError(f'Unsupported export format: {file_format}')

        return content.encode('utf-8')

    def export_filename(self, file_format: str) -> str:
        return f'{self.config.EXPORT_BASENAME}.{file_format}'

    def export_mimetype(self, file_format: str) -> str:
        return EXPORT_MIMETYPES[file_format]

    def _convert_to_csv(self, rows) -> str:
        """
        이력 데이터를 CSV 문자열로 변환

        첫 행의 키 순서를 헤더로 사용한다. 구분자 이스케이프는 하지 않는다.
        """
        if not rows:
            return ''

        headers = ','.join(str(key) for key in rows[0].keys())
        lines = [
            ','.join(_format_csv_value(value) for value in row.values())
            for row in rows
        ]
        return '\n'.join([headers] + lines)

    def clear_data(self):
        """대시보드 상태 초기화"""
        self.dashboard_data.reset()

    def close(self):
        """HTTP 세션 종료"""
        if self.session is not None:
            self.session.close()


def _format_csv_value(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
