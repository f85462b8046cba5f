#!filepath: sp3merge/steps/write_step.py
from __future__ import annotations

from sp3merge.engines.sp3_writer_engine import Sp3WriterEngine
from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.step import PipelineStep
from sp3merge.utils.filesystem import FileSystem
from sp3merge.utils.logger import logs


class WriteStep(PipelineStep):
    """
    MergedEphemeris → 输出 SP3 文件

    - 缺速度（policy=error）在打开文件之前检查
    - sink 在 with 块内打开 / 关闭，失败时同样关闭
    - 直接写目标文件，失败可能留下截断文件（不做临时文件替换）
    - OSError 原样上抛
    """

    stage = "written"
    upstream_stage = "merged"

    def __init__(self, engine: Sp3WriterEngine | None = None, inst=None):
        super().__init__(inst=inst)
        self.engine = engine or Sp3WriterEngine()

    def run(self, ctx: MergeContext) -> MergeContext:
        if ctx.merged is None:
            logs.warning(f"[{self.step_name}] nothing to write")
            return ctx

        # 先校验再打开文件，失败时不留下只有 header 的输出
        self.engine.check_writable(ctx.merged)

        output = ctx.output_file
        FileSystem.ensure_dir(output.parent)

        with self.inst.timer(f"write {output.name}"):
            with open(output, "w", encoding="utf-8", newline="\n") as sink:
                ctx.written_epochs = self.engine.write(sink, ctx.merged)

        logs.info(
            f"[{self.step_name}] {self.engine.engine_name}: {output} ← {ctx.written_epochs} epochs "
            f"({FileSystem.format_size(FileSystem.get_file_size(output))})"
        )
        return ctx
