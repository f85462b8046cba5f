#!filepath: sp3merge/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from sp3merge.observability.instrumentation import Instrumentation, NoOpInstrumentation
from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.step import PipelineStep
from sp3merge.utils.logger import logs
from sp3merge.utils.path import PathManager


class DataPipeline:
    """
    DataPipeline = 调度器（Scheduler）

    规则：
    - Pipeline 负责 orchestration（顺序 / 上下文 / 路径解析）
    - Pipeline 不做 Step 级计时（Step 自己定义 timed 边界）
    - 任何 Step 失败 → 记录日志后原样上抛，后续 Step 不再执行
    """

    def __init__(
        self,
        steps: List[PipelineStep],
        pm: type[PathManager] = PathManager,
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.pm = pm
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def build_context(
        self,
        input_files: Sequence[str | Path],
        output_file: str | Path,
        object_id: Optional[str] = None,
    ) -> MergeContext:
        return MergeContext(
            input_files=[self.pm.resolve_input(p) for p in input_files],
            output_file=self.pm.resolve_output(output_file),
            object_id=object_id,
        )

    def run(
        self,
        input_files: Sequence[str | Path],
        output_file: str | Path,
        object_id: Optional[str] = None,
    ) -> MergeContext:
        ctx = self.build_context(input_files, output_file, object_id)
        label = ctx.output_file.name

        logs.info(f"[Pipeline] ====== START {label} ({len(ctx.input_files)} inputs) ======")

        for step in self.steps:
            try:
                with step.timed():
                    ctx = step.run(ctx)
            except Exception as e:
                logs.error(
                    f"[Pipeline] {step.step_name} failed: {e} "
                    f"({step.upstream_stage or '-'} → {step.stage or '-'})"
                )
                raise

        self.inst.generate_timeline_report(label)
        logs.info(f"[Pipeline] ====== END {label} ======")

        return ctx
