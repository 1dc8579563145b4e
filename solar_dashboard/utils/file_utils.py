import os
from typing import Optional

from solar_dashboard.core.capabilities import FileSaver

def ensure_directory(directory: str):
    """디렉토리 확인/생성"""
    os.makedirs(directory, exist_ok=True)

def save_bytes_file(content: bytes, file_path: str) -> bool:
    """바이트 내용을 파일로 저장"""
    try:
        directory = os.path.dirname(file_path)
        if directory:
            ensure_directory(directory)

        with open(file_path, 'wb') as f:
            f.write(content)

        print(f"✅ 파일 저장 완료: {file_path}")
        return True

    except OSError as e:
        print(f"❌ 파일 저장 오류: {file_path} - {str(e)}")
        return False

def format_file_size(size_bytes: int) -> str:
    """파일 크기를 읽기 쉬운 형태로 변환"""
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB"]
    i = 0
    size = float(size_bytes)
    while size >= 1024 and i < len(size_names) - 1:
        size /= 1024
        i += 1

    return f"{round(size, 2)} {size_names[i]}"

class DirectoryFileSaver(FileSaver):
    """내보낸 데이터를 지정 디렉토리에 저장"""

    def __init__(self, directory: str = 'exports'):
        self.directory = directory

    def save(self, filename: str, content: bytes, mimetype: str) -> Optional[str]:
        file_path = os.path.join(self.directory, filename)
        if not save_bytes_file(content, file_path):
            return None

        print(f"📥 {filename} ({mimetype}, {format_file_size(len(content))})")
        return file_path
