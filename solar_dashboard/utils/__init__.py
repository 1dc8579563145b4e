"""
utils 모듈 - 공통 유틸리티 함수들

이 모듈은 다음 유틸리티들을 포함합니다:
- file_utils: 내보내기 파일 저장
"""

from .file_utils import (
    ensure_directory,
    save_bytes_file,
    format_file_size,
    DirectoryFileSaver
)

__version__ = "1.0.0"
__author__ = "Solar Prediction Team"

__all__ = [
    'ensure_directory',
    'save_bytes_file',
    'format_file_size',
    'DirectoryFileSaver'
]
