#!filepath: sp3merge/steps/select_object_step.py
from __future__ import annotations

from sp3merge.pipeline.context import MergeContext
from sp3merge.pipeline.step import PipelineStep
from sp3merge.utils.errors import (
    InvalidObjectIdError,
    NoSatelliteDataError,
    ObjectNotFoundError,
)
from sp3merge.utils.logger import logs

# P / V 记录与 header 第 3 行都按 3 列卫星号排版
OBJECT_ID_WIDTH = 3


class SelectObjectStep(PipelineStep):
    """
    SelectObjectStep

    - object_id：ctx.object_id（配置覆盖）优先，否则取第一个文件的第一颗卫星
    - object_id 必须正好 3 个字符，否则 InvalidObjectIdError
    - 第一个文件没有任何卫星 → NoSatelliteDataError
    - 任一文件缺少该卫星 → ObjectNotFoundError
    - 每个输入的摘要交给 inst.reporter
    """

    stage = "ephemerides"
    upstream_stage = "documents"

    def run(self, ctx: MergeContext) -> MergeContext:
        if not ctx.documents:
            raise NoSatelliteDataError("no input documents to select from")

        first = ctx.documents[0]
        if not first.object_ids:
            raise NoSatelliteDataError(f"no satellite data in first input {first.source}")

        object_id = ctx.object_id or first.object_ids[0]
        if len(object_id) != OBJECT_ID_WIDTH:
            raise InvalidObjectIdError(
                f"object id {object_id!r} must be {OBJECT_ID_WIDTH} characters wide"
            )
        logs.info(f"[{self.step_name}] object_id = {object_id}")

        ephemerides = []
        for doc in ctx.documents:
            eph = doc.get(object_id)
            if eph is None:
                raise ObjectNotFoundError(f"{doc.source} has no data for {object_id}")
            self.inst.reporter.report(doc.source, eph)
            ephemerides.append(eph)

        self.inst.reporter.done(object_id)

        ctx.object_id = object_id
        ctx.ephemerides = ephemerides
        return ctx
