#!filepath: sp3merge/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    项目统一日志模块（loguru）
    ---------------------------------------
    - stderr 输出（交互式运行）
    - 可选文件输出，按日期切割 + 保留周期
    - 包含函数级日志装饰器 catch()
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger（会清空之前的 sink）
        """
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format=_LOG_FORMAT,
            backtrace=False,
            diagnose=False,
        )

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/sp3merge_{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_LOG_FORMAT,
                backtrace=True,
                diagnose=True,
            )
            logger.info(f"-----------Logger initialized ({self.log_dir})-----------")

    # ---------- 日志方法 ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:
        """
        记录调用 / 耗时，异常时打日志后继续抛出（不吞异常）。
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, kwargs={json.dumps(kwargs, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.error(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(log_dir: Optional[str] = None, level: str = "INFO",
                 rotation: str = "1 day", retention: str = "30 days") -> Logging:
    """
    按配置重建全局 logger，返回同一个 `logs` 门面。
    """
    logs.log_dir = log_dir
    logs.rotation = rotation
    logs.retention = retention
    logs.level = level
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logs._configure()
    return logs


# 默认全局 logs（stderr only，可被 init_logging 替换）
logs = Logging()
