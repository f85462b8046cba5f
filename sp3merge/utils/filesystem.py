#!filepath: sp3merge/utils/filesystem.py
from pathlib import Path

from sp3merge.utils.logger import logs


class FileSystem:
    """
    统一文件系统工具
    - 自动创建目录
    - 获取文件大小 / 可读格式
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def file_exists(path: str | Path) -> bool:
        return Path(path).is_file()

    @staticmethod
    def get_file_size(path: str | Path) -> int:
        """
        返回文件大小（字节），文件不存在返回 0
        """
        p = Path(path)
        if not p.exists():
            return 0
        return p.stat().st_size

    @staticmethod
    def format_size(size_bytes: int) -> str:
        """
        将字节转换为可读格式（KB / MB）
        """
        size = float(size_bytes)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024:
                return f"{size:.2f} {unit}"
            size /= 1024
        return f"{size:.2f} PB"
