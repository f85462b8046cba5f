#!filepath: sp3merge/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from sp3merge.core.types import MergedEphemeris, ObjectEphemeris, Sp3Document


@dataclass
class MergeContext:
    """
    MergeContext = Pipeline 运行期唯一上下文

    规则：
    - Pipeline 负责构造（路径已解析）
    - 每个 Step 只写自己负责的 slot
    - 不放业务逻辑
    """

    # -------------------------
    # resolved paths
    # -------------------------
    input_files: List[Path]
    output_file: Path

    # 可选覆盖；SelectObjectStep 之后一定有值
    object_id: Optional[str] = None

    # -------------------------
    # stage outputs
    # -------------------------
    documents: List[Sp3Document] = field(default_factory=list)       # ReadStep
    ephemerides: List[ObjectEphemeris] = field(default_factory=list)  # SelectObjectStep
    merged: Optional[MergedEphemeris] = None                          # MergeStep
    written_epochs: int = 0                                           # WriteStep
