#!filepath: sp3merge/pipeline/step.py
from __future__ import annotations

from sp3merge.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from sp3merge.pipeline.context import MergeContext


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. orchestration（循环 / 调用 engine / 写 ctx slot）
      2. 提供 Step 级时间语义边界（parent scope）

    规则：
      - Step 本身不进入 timeline，leaf timer 在 Step 内部
      - Instrumentation 可选，Step 行为不依赖 inst 是否存在
      - 失败直接抛异常，由 Pipeline 记录后继续上抛
    """

    stage: str = ""           # e.g. "merged"
    upstream_stage: str = ""  # e.g. "ephemerides"

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """
        Step 级时间语义边界：record=False，不进入 timeline。
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: MergeContext) -> MergeContext:
        raise NotImplementedError
