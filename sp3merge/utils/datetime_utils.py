#!filepath: sp3merge/utils/datetime_utils.py
from __future__ import annotations
from datetime import datetime, timedelta
from typing import Tuple


class DateTimeUtils:
    """
    SP3 epoch <-> datetime

    约定：
      - datetime 一律 naive，时间尺度由所在 ephemeris 的 time_system 决定
      - 精度 = microsecond（SP3 秒字段 8 位小数，超出部分四舍五入）
    """

    # ================================================================
    # "YYYY MM DD hh mm ss.ssssssss" → datetime
    # ================================================================
    @classmethod
    def parse_sp3_epoch(cls, text: str) -> datetime:
        """
        输入示例：
            "2014  1  4 21 56  0.00000000"
            "2023 10  1  0  0 59.99999999"   # 进位到下一分钟
        """
        parts = text.split()
        if len(parts) != 6:
            raise ValueError(f"无法解析 SP3 epoch: {text!r}")

        year, month, day, hour, minute = (int(p) for p in parts[:5])
        seconds = float(parts[5])
        if not 0.0 <= seconds <= 61.0:
            raise ValueError(f"SP3 epoch 秒字段越界: {text!r}")

        base = datetime(year, month, day, hour, minute)
        return base + timedelta(microseconds=round(seconds * 1_000_000))

    # ================================================================
    # datetime → (year, month, day, hour, minute, seconds-of-minute)
    # ================================================================
    @classmethod
    def split_epoch(cls, dt: datetime) -> Tuple[int, int, int, int, int, float]:
        seconds = dt.second + dt.microsecond / 1_000_000
        return dt.year, dt.month, dt.day, dt.hour, dt.minute, seconds

    @classmethod
    def format_sp3_epoch(cls, dt: datetime) -> str:
        """datetime → "YYYY MM DD hh mm ss.ssssssss"（固定列宽，永远用 '.' 作小数点）"""
        year, month, day, hour, minute, seconds = cls.split_epoch(dt)
        return f"{year:4d} {month:2d} {day:2d} {hour:2d} {minute:2d} {seconds:11.8f}"
