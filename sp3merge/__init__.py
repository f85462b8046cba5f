#!filepath: sp3merge/__init__.py

from .utils.logger import Logging, logs
from .utils.filesystem import FileSystem
from .utils.path import PathManager
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig

__version__ = "0.1.0"

# alias 简化调用
datetime_utils = DateTimeUtils
fs = FileSystem
path = PathManager

__all__ = [
    "logs", "Logging",
    "fs",
    "path",
    "AppConfig",
    "datetime_utils",
    "__version__",
]
