"""
데이터 다운로드 라우트
"""
from io import BytesIO
from flask import Blueprint, jsonify, send_file

from solar_dashboard.core.prediction_api import EXPORT_MIMETYPES
from solar_dashboard.web.app import get_dashboard
from solar_dashboard.core.capabilities import FileSaver

download_bp = Blueprint('download', __name__)

class FlaskFileSaver(FileSaver):
    """내보낸 데이터를 첨부파일 응답으로 변환"""

    def save(self, filename, content, mimetype):
        output = BytesIO(content)
        output.seek(0)

        return send_file(
            output,
            mimetype=mimetype,
            as_attachment=True,
            download_name=filename
        )

@download_bp.route('/<file_format>')
def download_data(file_format):
    """현재 대시보드 데이터 다운로드 (csv, json)"""
    if file_format not in EXPORT_MIMETYPES:
        return jsonify({'error': f'Unsupported file format: {file_format}'}), 400

    return get_dashboard().export(file_format, FlaskFileSaver())
