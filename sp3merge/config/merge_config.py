#!filepath: sp3merge/config/merge_config.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MergeConfig(BaseModel):
    """
    合并任务定义

    - measurement_files 顺序 = 合并顺序（同一 epoch 后出现的文件覆盖前面的）
    - data_dir 为空时由 PathManager 决定 data root
    - object_id 为空时取第一个输入文件中的第一颗卫星
    """

    model_config = ConfigDict(populate_by_name=True)

    measurement_files: List[str] = Field(..., alias="measurementFiles", min_length=1)
    output_file_name: str = Field(..., alias="outputFileName", min_length=1)
    data_dir: Optional[str] = Field(None, alias="dataDir")
    # SP3 卫星号固定 3 列，例如 "L51" / "G01"
    object_id: Optional[str] = Field(None, alias="objectId", min_length=3, max_length=3)
