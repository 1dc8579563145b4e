"""
API 엔드포인트 라우트
"""
from dataclasses import asdict
from flask import Blueprint, request, jsonify, send_file

from solar_dashboard.core.prediction_api import PredictionError
from solar_dashboard.core.capabilities import StaticCoordinateProvider
from solar_dashboard.visualization import default_chart_generator
from solar_dashboard.web.app import get_dashboard, get_gateway
from solar_dashboard.web.dashboard import ValidationError

api_bp = Blueprint('api', __name__)

@api_bp.route('/predict', methods=['POST'])
def predict():
    """발전량 예측 요청"""
    dashboard = get_dashboard()
    form = request.get_json(silent=True) or {}

    try:
        prediction = dashboard.submit(form)
    except ValidationError as e:
        return jsonify({'error': 'Invalid input.', 'errors': e.errors}), 400
    except PredictionError as e:
        return jsonify({'error': e.message, 'state': dashboard.dashboard_data.to_dict()}), 502

    return jsonify({
        'success': True,
        'prediction': asdict(prediction),
        'summary': dashboard.prediction_summary(),
        'optimal_text': dashboard.optimal_configuration_text(),
        'state': dashboard.dashboard_data.to_dict()
    })

@api_bp.route('/optimal_config', methods=['POST'])
def optimal_config():
    """위도 기반 최적 각도 계산"""
    data = request.get_json(silent=True) or {}

    try:
        latitude = float(data['latitude'])
        month = int(data['month']) if data.get('month') is not None else None
    except (KeyError, TypeError, ValueError):
        return jsonify({'error': 'A numeric latitude is required.'}), 400

    if not -90 <= latitude <= 90:
        return jsonify({'error': 'Latitude must be between -90 and 90.'}), 400

    result = get_gateway().calculate_optimal_configuration(latitude, month)
    return jsonify({'success': True, **asdict(result)})

@api_bp.route('/location', methods=['POST'])
def use_location():
    """브라우저에서 받은 현재 위치를 입력 폼에 반영"""
    dashboard = get_dashboard()
    data = request.get_json(silent=True) or {}

    provider = StaticCoordinateProvider(data.get('latitude'), data.get('longitude'))
    message = dashboard.use_current_location(provider)
    if message:
        return jsonify({'error': message}), 400

    return jsonify({
        'success': True,
        'latitude': dashboard.form['latitude'],
        'longitude': dashboard.form['longitude']
    })

@api_bp.route('/reset', methods=['POST'])
def reset():
    """입력 폼과 대시보드 상태 초기화"""
    dashboard = get_dashboard()
    dashboard.reset_form()
    return jsonify({
        'success': True,
        'form': dashboard.form,
        'state': dashboard.dashboard_data.to_dict()
    })

@api_bp.route('/charts/scatter')
def get_scatter_chart():
    """천정각-발전량 산점도"""
    dashboard = get_dashboard()
    prediction = dashboard.dashboard_data.current_prediction

    try:
        if prediction is not None:
            img_bytes = default_chart_generator.generate_scatter_chart(
                current_zenith=dashboard.form.get('zenith'),
                current_power_kw=prediction.predicted_generated_kw
            )
        else:
            img_bytes = default_chart_generator.generate_scatter_chart()
    except (TypeError, ValueError) as e:
        return jsonify({'error': f'Chart generation failed: {str(e)}'}), 500

    return send_file(img_bytes, mimetype='image/png')
