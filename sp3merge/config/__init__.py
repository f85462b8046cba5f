#!filepath: sp3merge/config/__init__.py
from .app_config import AppConfig
from .format_config import RecordFormatConfig
from .header_config import HeaderConfig
from .log_config import LogConfig
from .merge_config import MergeConfig

__all__ = [
    "AppConfig",
    "HeaderConfig",
    "LogConfig",
    "MergeConfig",
    "RecordFormatConfig",
]
