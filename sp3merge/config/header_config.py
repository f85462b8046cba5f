#!filepath: sp3merge/config/header_config.py
from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

COMMENT_FILLER = "CCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCC"


class HeaderConfig(BaseModel):
    """
    SP3 header 字段来源（22 行 header 中所有非数据字段）

    语义：
      - 默认值 = 历史输出中的占位内容，不从合并后的数据推导
      - 需要真实元数据时由调用方覆盖，不需要改 header 排版逻辑

    Line 1 : version / pos_vel_flag / start_epoch / num_epochs /
             data_used / coordinate_system / orbit_type / agency
    Line 2 : gps_week / seconds_of_week / epoch_interval / mjd / fractional_day
    Line 13: file_type / time_system
    Line 15: base_pos_vel / base_clk_rate
    Line 19-22: comments
    """

    # ---- line 1 ----
    version: str = Field("c", min_length=1, max_length=1)
    pos_vel_flag: str = Field("V", pattern="^[PV]$")
    start_epoch: datetime = datetime(2014, 1, 4, 21, 56, 0)
    num_epochs: int = Field(30413, ge=0, le=9_999_999)
    data_used: str = Field("ORBIT", max_length=5)
    coordinate_system: str = Field("ITRF", max_length=5)
    orbit_type: str = Field("FIT", max_length=3)
    agency: str = Field("CNES", max_length=4)

    # ---- line 2 ----
    gps_week: int = Field(1773, ge=0, le=9999)
    seconds_of_week: float = Field(597360.0, ge=0.0, lt=604800.0)
    epoch_interval: float = Field(60.0, gt=0.0)
    mjd: int = Field(56661, ge=0, le=99999)
    fractional_day: float = Field(0.9138888888889, ge=0.0, lt=1.0)

    # ---- line 13 ----
    file_type: str = Field("L", min_length=1, max_length=1)
    time_system: str = Field("TAI", min_length=3, max_length=3)

    # ---- line 15 ----
    base_pos_vel: float = 1.25
    base_clk_rate: float = 1.025

    # ---- line 19-22 ----
    comments: List[str] = Field(
        default_factory=lambda: [COMMENT_FILLER] * 4,
        min_length=4,
        max_length=4,
    )
