import pytest
import requests

from solar_dashboard.config import TestingConfig
from solar_dashboard.core.dashboard_state import DashboardState
from solar_dashboard.core.prediction_api import PredictionGateway
from solar_dashboard.web.app import create_app


class FakeResponse:
    """requests.Response 대역"""

    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise requests.exceptions.JSONDecodeError('Expecting value', self.text or '', 0)
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f'{self.status_code} Error', response=self)


class FakeSession:
    """
    requests.Session 대역

    post 호출시 큐에 넣어둔 응답을 순서대로 반환하거나 예외를 발생시킨다.
    on_post 콜백으로 요청 시점의 상태를 확인할 수 있다.
    """

    def __init__(self, *outcomes, on_post=None):
        self.outcomes = list(outcomes)
        self.on_post = on_post
        self.calls = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        if self.on_post is not None:
            self.on_post()

        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


MUMBAI_PREDICTION = {'latitude': 19.076, 'longitude': 72.8777, 'predicted_generated_kw': 4.2}


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def gateway(fake_session):
    return PredictionGateway(
        state=DashboardState(),
        session=fake_session,
        settings=TestingConfig
    )


@pytest.fixture
def app(gateway):
    app = create_app('testing', gateway=gateway)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
