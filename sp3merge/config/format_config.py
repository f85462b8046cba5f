#!filepath: sp3merge/config/format_config.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class RecordFormatConfig(BaseModel):
    """
    SP3 body 记录格式参数（format compliance）

    - 默认 marker 与历史输出一致："PL" / "VL" 两字符 + object id
      （部分 SP3 版本只要求单字符 "P" / "V"，按需覆盖）
    - missing_velocity：样本缺速度时的处理策略
        error : 抛 MissingVelocityError（默认）
        zero  : 速度行全部写 0
        omit  : 不写速度行（每个 epoch 只有 2 行）
    """

    epoch_marker: str = Field("*  ", min_length=1, max_length=3)
    position_marker: str = Field("PL", min_length=1, max_length=2)
    velocity_marker: str = Field("VL", min_length=1, max_length=2)
    satellite_list_marker: str = Field("L", max_length=1)

    clock_placeholder: str = "999999.999999"
    end_marker: str = "EOF"

    missing_velocity: Literal["error", "zero", "omit"] = "error"
