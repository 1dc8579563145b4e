"""
메인 페이지 라우트
"""
from flask import Blueprint, render_template_string, jsonify

from solar_dashboard.web.app import get_dashboard
from solar_dashboard.web.dashboard import FIELD_LABELS

main_bp = Blueprint('main', __name__)

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Solar Power Prediction Dashboard</title>
</head>
<body>
  <h1>Solar Power Prediction Dashboard</h1>
  <form id="prediction-form">
    {% for name, label in labels.items() %}
    <label>{{ label }}
      <input name="{{ name }}" value="{{ form[name] if form[name] is not none else '' }}">
    </label>
    {% endfor %}
  </form>
  {% if data.loading %}<p class="loading">Predicting...</p>{% endif %}
  {% if data.error %}<p class="error">{{ data.error }}</p>{% endif %}
  {% if summary %}<p class="summary">{{ summary }}</p>{% endif %}
  {% if optimal_text %}<p class="optimal">{{ optimal_text }}</p>{% endif %}
  <img src="{{ url_for('api.get_scatter_chart') }}" alt="Power vs zenith angle">
  <p>
    <a href="{{ url_for('download.download_data', file_format='csv') }}">Export CSV</a>
    <a href="{{ url_for('download.download_data', file_format='json') }}">Export JSON</a>
  </p>
</body>
</html>
"""

@main_bp.route('/')
def index():
    """대시보드 메인 페이지"""
    dashboard = get_dashboard()
    return render_template_string(
        INDEX_TEMPLATE,
        labels=FIELD_LABELS,
        form=dashboard.form,
        data=dashboard.dashboard_data,
        summary=dashboard.prediction_summary(),
        optimal_text=dashboard.optimal_configuration_text()
    )

@main_bp.route('/state')
def state():
    """현재 대시보드 상태 조회"""
    dashboard = get_dashboard()
    return jsonify(dashboard.dashboard_data.to_dict())

@main_bp.app_errorhandler(404)
def not_found(error):
    """404 에러 응답"""
    return jsonify({'error': 'Page not found.'}), 404
