# 🌞 태양광 발전량 예측 대시보드 실행 스크립트
import os
from dotenv import load_dotenv
from pyngrok import ngrok

from solar_dashboard.config import get_config
from solar_dashboard.web import create_app

load_dotenv()

app = create_app()


def open_tunnel(port):
    """NGROK_AUTH_TOKEN이 설정된 경우 외부 접속용 터널 생성"""
    ngrok_token = os.getenv('NGROK_AUTH_TOKEN')
    if not ngrok_token:
        return None

    ngrok.kill()
    ngrok.set_auth_token(ngrok_token)
    return ngrok.connect(port, region="ap")


def main():
    port = get_config().PORT

    # ngrok 연결 (네트워크 문제로 실패할 수 있으므로 예외 처리)
    try:
        public_url = open_tunnel(port)
    except Exception as e:
        print(f"\n⚠️ ngrok 연결 실패: {str(e)}")
        public_url = None

    if public_url:
        print(f"\n🌍 여기에 접속하세요: {public_url}\n")
    else:
        print(f"🌍 로컬에서 접속하세요: http://127.0.0.1:{port}\n")

    print("📊 대시보드: /")
    print("📥 데이터 다운로드: /download/csv, /download/json")

    # Flask 앱 실행
    app.run(port=port, debug=app.config.get('FLASK_DEBUG', False))


if __name__ == '__main__':
    main()
