#!filepath: sp3merge/steps/read_step.py
from __future__ import annotations

from sp3merge.dataloader.sp3_reader import Sp3Reader
from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.step import PipelineStep
from sp3merge.utils.logger import logs


class ReadStep(PipelineStep):
    """
    输入文件 → Sp3Document（顺序保持 = 合并优先级）
    """

    stage = "documents"
    upstream_stage = "input_files"

    def __init__(self, reader: Sp3Reader | None = None, inst=None):
        super().__init__(inst=inst)
        self.reader = reader or Sp3Reader()

    def run(self, ctx: MergeContext) -> MergeContext:
        documents = []
        for i, path in enumerate(ctx.input_files):
            with self.inst.timer(f"read[{i}] {path.name}"):
                documents.append(self.reader.read(path))

        logs.info(f"[{self.step_name}] {len(documents)} files parsed")
        ctx.documents = documents
        return ctx
