#!filepath: sp3merge/steps/merge_step.py
from __future__ import annotations

from sp3merge.engines.merge_engine import MergeEngine
from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.step import PipelineStep
from sp3merge.utils.errors import NoSatelliteDataError
from sp3merge.utils.logger import logs


class MergeStep(PipelineStep):
    stage = "merged"
    upstream_stage = "ephemerides"

    def __init__(self, engine: MergeEngine | None = None, inst=None):
        super().__init__(inst=inst)
        self.engine = engine or MergeEngine()

    def run(self, ctx: MergeContext) -> MergeContext:
        with self.inst.timer("merge"):
            merged = self.engine.execute(ctx.ephemerides, ctx.object_id)

        # 空结果不允许写出
        if not merged.samples:
            raise NoSatelliteDataError(f"merged ephemeris for {ctx.object_id} is empty")

        ctx.merged = merged
        logs.debug(f"[{self.step_name}] {self.engine.engine_name} → {len(merged)} epochs")
        return ctx
