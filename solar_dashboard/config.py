"""
태양광 발전량 예측 대시보드 설정 파일
"""
import os
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()

class Config:
    """기본 설정"""
    # Flask 설정
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
    TESTING = False
    PORT = int(os.getenv('PORT', 5000))

    # 예측 서버 설정
    PREDICTION_API_URL = os.getenv('PREDICTION_API_URL', 'http://127.0.0.1:8000')
    PREDICTION_TIMEOUT = float(os.getenv('PREDICTION_TIMEOUT', 10))
    PREDICTION_FALLBACK_ERROR = 'Prediction failed. Please try again.'

    # 입력 검증 프로파일 (extended: 천정각 0~360 / 입사각 0~180, strict: 둘 다 0~90)
    VALIDATION_PROFILE = os.getenv('VALIDATION_PROFILE', 'extended')

    # 예측 성공시 이력 기록 여부
    RECORD_HISTORY = os.getenv('RECORD_HISTORY', 'false').lower() == 'true'

    # 내보내기 파일명
    EXPORT_BASENAME = os.getenv('EXPORT_BASENAME', 'solar-prediction-data')

    # 최적 각도 계산 매개변수
    TILT_OFFSET = 10
    MIN_TILT = 0
    MAX_TILT = 60
    PREDICTED_INCREASE = 15

    # 기본 위치 (뭄바이)
    DEFAULT_LOCATION_NAME = 'Mumbai, India'
    DEFAULT_LOCATION = (19.076, 72.8777)

    # 입력 폼 기본값
    DEFAULT_IRRADIANCE = 800
    DEFAULT_AZIMUTH = 180
    DEFAULT_ZENITH = 45
    DEFAULT_ANGLE_OF_INCIDENCE = 30

class DevelopmentConfig(Config):
    """개발 환경 설정"""
    FLASK_DEBUG = True
    FLASK_ENV = 'development'

class ProductionConfig(Config):
    """운영 환경 설정"""
    FLASK_DEBUG = False
    FLASK_ENV = 'production'

class TestingConfig(Config):
    """테스트 환경 설정"""
    FLASK_DEBUG = False
    FLASK_ENV = 'testing'
    TESTING = True
    PREDICTION_API_URL = 'http://prediction.test'
    RECORD_HISTORY = False

# 환경에 따른 설정 선택
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(name=None):
    """현재 환경의 설정 반환"""
    env = name or os.getenv('FLASK_ENV', 'default')
    return config.get(env, config['default'])
