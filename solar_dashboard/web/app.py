"""
Flask 애플리케이션 팩토리
"""
from flask import Flask, current_app

from solar_dashboard.config import get_config
from solar_dashboard.core.dashboard_state import DashboardState
from solar_dashboard.core.prediction_api import PredictionGateway
from solar_dashboard.web.dashboard import DashboardController

def create_app(config_name=None, gateway=None):
    """Flask 앱 생성 및 설정"""
    settings = get_config(config_name)

    app = Flask(__name__)
    app.config.from_object(settings)

    # 세션당 하나의 대시보드 상태를 만들어 공유
    if gateway is None:
        gateway = PredictionGateway(state=DashboardState(), settings=settings)
    app.extensions['prediction_gateway'] = gateway
    app.extensions['dashboard'] = DashboardController(gateway, settings)

    # 라우트 등록
    from solar_dashboard.web.routes import register_all_blueprints
    register_all_blueprints(app)

    if settings.FLASK_DEBUG:
        print(f"🔗 Prediction API: {gateway.base_url}")

    return app

def get_dashboard() -> DashboardController:
    """현재 앱의 대시보드 컨트롤러"""
    return current_app.extensions['dashboard']

def get_gateway() -> PredictionGateway:
    """현재 앱의 예측 게이트웨이"""
    return current_app.extensions['prediction_gateway']
