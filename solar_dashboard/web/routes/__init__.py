"""
web.routes 모듈 - Flask 라우트 모음

이 모듈은 다음 라우트들을 포함합니다:
- main_routes: 대시보드 메인 페이지 및 상태 조회
- api_routes: 예측/최적 각도/위치/초기화/차트 API
- download_routes: 데이터 내보내기
"""

from .main_routes import main_bp
from .api_routes import api_bp
from .download_routes import download_bp

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"

# 모든 블루프린트 목록
all_blueprints = [
    (main_bp, {}),  # (blueprint, url_prefix)
    (api_bp, {'url_prefix': '/api'}),
    (download_bp, {'url_prefix': '/download'})
]

def register_all_blueprints(app):
    """모든 블루프린트를 Flask 앱에 등록"""
    for blueprint, options in all_blueprints:
        app.register_blueprint(blueprint, **options)

    if app.config.get('FLASK_DEBUG'):
        print(f"✅ {len(all_blueprints)}개 블루프린트 등록 완료")

__all__ = [
    'main_bp',
    'api_bp',
    'download_bp',
    'all_blueprints',
    'register_all_blueprints'
]
