import json

import pytest
import requests

from conftest import MUMBAI_PREDICTION, FakeResponse, FakeSession
from solar_dashboard.config import TestingConfig
from solar_dashboard.core.dashboard_state import DashboardState
from solar_dashboard.core.models import DashboardData, PredictionInput, PredictionResponse
from solar_dashboard.core.prediction_api import PredictionError, PredictionGateway

FALLBACK = 'Prediction failed. Please try again.'


def make_input(**overrides):
    values = dict(
        location='Mumbai, India',
        latitude=19.076,
        longitude=72.8777,
        shortwave_radiation_backwards_sfc=800,
        azimuth=180,
        zenith=45,
        angle_of_incidence=30,
    )
    values.update(overrides)
    return PredictionInput(**values)


def make_gateway(*outcomes, on_post=None):
    session = FakeSession(*outcomes, on_post=on_post)
    gateway = PredictionGateway(state=DashboardState(), session=session, settings=TestingConfig)
    return gateway, session


def test_predict_posts_payload_with_json_headers():
    gateway, session = make_gateway(FakeResponse(200, MUMBAI_PREDICTION))

    gateway.predict(make_input())

    call = session.calls[0]
    assert call['url'] == 'http://prediction.test/predict'
    assert call['headers'] == {'Content-Type': 'application/json', 'Accept': 'application/json'}
    assert call['timeout'] == TestingConfig.PREDICTION_TIMEOUT
    assert call['json'] == {
        'location': 'Mumbai, India',
        'latitude': 19.076,
        'longitude': 72.8777,
        'shortwave_radiation_backwards_sfc': 800,
        'azimuth': 180,
        'zenith': 45,
        'angle_of_incidence': 30,
    }


def test_payload_omits_missing_optional_fields():
    payload = make_input(location=None, latitude=None, longitude=None).to_payload()
    assert set(payload) == {'shortwave_radiation_backwards_sfc', 'azimuth', 'zenith', 'angle_of_incidence'}


def test_base_url_trailing_slash_is_ignored():
    gateway = PredictionGateway(
        base_url='http://example.test/',
        session=FakeSession(FakeResponse(200, MUMBAI_PREDICTION)),
        settings=TestingConfig
    )
    gateway.predict(make_input())
    assert gateway.session.calls[0]['url'] == 'http://example.test/predict'


def test_loading_is_published_before_the_request_resolves():
    seen_during_request = []
    gateway, _ = make_gateway(
        FakeResponse(200, MUMBAI_PREDICTION),
        on_post=lambda: seen_during_request.append(gateway.value)
    )
    emissions = []
    gateway.subscribe(emissions.append)

    response = gateway.predict(make_input())

    assert seen_during_request[0].loading is True
    assert seen_during_request[0].error is None
    assert [e.loading for e in emissions] == [False, True, False]
    assert emissions[-1].current_prediction == response
    assert response == PredictionResponse(19.076, 72.8777, 4.2)


def test_loading_clears_previous_error():
    gateway, _ = make_gateway(FakeResponse(200, MUMBAI_PREDICTION))
    gateway.apply_update(error='old')
    emissions = []
    gateway.subscribe(emissions.append)

    gateway.predict(make_input())

    assert emissions[1].loading is True
    assert emissions[1].error is None


def test_error_detail_is_used_verbatim():
    gateway, _ = make_gateway(FakeResponse(422, {'detail': 'bad zenith'}))

    with pytest.raises(PredictionError) as exc_info:
        gateway.predict(make_input())

    assert exc_info.value.message == 'bad zenith'
    assert exc_info.value.status_code == 422
    assert gateway.value.loading is False
    assert gateway.value.error == 'bad zenith'


@pytest.mark.parametrize("outcome", [
    FakeResponse(500, {'message': 'no detail here'}),
    FakeResponse(500, {'detail': ''}),
    FakeResponse(422, {'detail': [{'loc': ['body', 'zenith'], 'msg': 'field required'}]}),
    FakeResponse(502, None, text='<html>Bad Gateway</html>'),
    requests.exceptions.ConnectionError('connection refused'),
    requests.exceptions.Timeout('timed out'),
])
def test_fallback_message_without_detail(outcome):
    gateway, _ = make_gateway(outcome)

    with pytest.raises(PredictionError) as exc_info:
        gateway.predict(make_input())

    assert str(exc_info.value) == FALLBACK
    assert gateway.value.error == FALLBACK
    assert gateway.value.loading is False


def test_malformed_success_body_is_reported_as_failure():
    gateway, _ = make_gateway(FakeResponse(200, {'latitude': 1.0}))

    with pytest.raises(PredictionError):
        gateway.predict(make_input())

    assert gateway.value.error == FALLBACK
    assert gateway.value.current_prediction is None


def test_state_is_updated_before_failure_is_raised():
    gateway, _ = make_gateway(FakeResponse(400, {'detail': 'bad zenith'}))
    emissions = []
    gateway.subscribe(emissions.append)

    with pytest.raises(PredictionError):
        gateway.predict(make_input())

    assert emissions[-1].loading is False
    assert emissions[-1].error == 'bad zenith'


def test_stale_prediction_survives_later_error():
    gateway, _ = make_gateway(
        FakeResponse(200, MUMBAI_PREDICTION),
        FakeResponse(400, {'detail': 'bad zenith'})
    )
    first = gateway.predict(make_input())

    with pytest.raises(PredictionError):
        gateway.predict(make_input(zenith=400))

    assert gateway.value.current_prediction == first
    assert gateway.value.error == 'bad zenith'


def test_last_response_wins():
    gateway, _ = make_gateway(
        FakeResponse(200, MUMBAI_PREDICTION),
        FakeResponse(200, {'latitude': -33.87, 'longitude': 151.21, 'predicted_generated_kw': 1.5})
    )
    gateway.predict(make_input())
    gateway.predict(make_input(latitude=-33.87, longitude=151.21))

    assert gateway.value.current_prediction.predicted_generated_kw == 1.5


def test_calculate_optimal_configuration_makes_no_request():
    gateway, session = make_gateway()
    result = gateway.calculate_optimal_configuration(-25.0)

    assert result.optimal_azimuth == 0
    assert result.optimal_tilt == 15.0
    assert session.calls == []


def test_clear_data_resets_state():
    gateway, session = make_gateway(FakeResponse(200, MUMBAI_PREDICTION))
    gateway.predict(make_input())
    gateway.apply_update(optimal_config=gateway.calculate_optimal_configuration(19.076), error='x')

    gateway.clear_data()

    assert gateway.value == DashboardData.initial()
    assert gateway.value.to_dict() == {
        'current_prediction': None,
        'optimal_config': None,
        'historical_data': [],
        'loading': False,
        'error': None,
    }
    assert len(session.calls) == 1


def test_export_json_matches_full_state():
    gateway, _ = make_gateway(FakeResponse(200, MUMBAI_PREDICTION))
    gateway.predict(make_input())
    gateway.apply_update(optimal_config=gateway.calculate_optimal_configuration(19.076))

    payload = gateway.export_data('json')

    assert isinstance(payload, bytes)
    assert json.loads(payload) == gateway.value.to_dict()
    assert json.loads(payload)['current_prediction'] == MUMBAI_PREDICTION
    assert payload.decode('utf-8').startswith('{\n  "current_prediction"')


def test_export_json_of_initial_state():
    gateway, _ = make_gateway()
    assert json.loads(gateway.export_data('json')) == {
        'current_prediction': None,
        'optimal_config': None,
        'historical_data': [],
        'loading': False,
        'error': None,
    }


def test_export_json_keeps_non_ascii_text():
    gateway, _ = make_gateway()
    gateway.apply_update(historical_data=({'location': 'São Paulo', 'note': '태양광'},))

    text = gateway.export_data('json').decode('utf-8')

    assert '"location": "São Paulo"' in text
    assert '태양광' in text
    assert '\\u' not in text


def test_export_csv_uses_first_row_keys():
    gateway, _ = make_gateway()
    gateway.apply_update(historical_data=({'a': 1, 'b': 2}, {'a': 3, 'b': 4}))

    assert gateway.export_data('csv') == b'a,b\n1,2\n3,4'


def test_export_csv_empty_history():
    gateway, _ = make_gateway()
    assert gateway.export_data('csv') == b''


def test_export_csv_does_not_escape_values():
    gateway, _ = make_gateway()
    gateway.apply_update(historical_data=({'place': 'Mumbai, India', 'ok': True, 'note': None},))

    assert gateway.export_data('csv').decode('utf-8') == 'place,ok,note\nMumbai, India,true,'


def test_export_reads_snapshot_at_call_time():
    gateway, _ = make_gateway()
    gateway.apply_update(historical_data=({'a': 1},))
    payload = gateway.export_data('csv')
    gateway.apply_update(historical_data=({'a': 2},))

    assert payload == b'a\n1'


def test_export_unknown_format():
    gateway, _ = make_gateway()
    with pytest.raises(ValueError):
        gateway.export_data('xml')


def test_export_file_metadata():
    gateway, _ = make_gateway()
    assert gateway.export_filename('csv') == 'solar-prediction-data.csv'
    assert gateway.export_filename('json') == 'solar-prediction-data.json'
    assert gateway.export_mimetype('csv') == 'text/csv'
    assert gateway.export_mimetype('json') == 'application/json'


def test_close_closes_session():
    gateway, session = make_gateway()
    gateway.close()
    assert session.closed is True
