#!filepath: sp3merge/engines/merge_engine.py
from __future__ import annotations

from typing import Sequence

import pandas as pd

from sp3merge.core.types import MergedEphemeris, ObjectEphemeris
from sp3merge.engines.base import BaseEngine
from sp3merge.utils.errors import EphemerisMismatchError, ObjectNotFoundError
from sp3merge.utils.logger import logs


class MergeEngine(BaseEngine):
    """
    MergeEngine（冻结版）

    输入：
      - N 个 ObjectEphemeris（顺序 = 优先级，越靠后优先级越高）
      - object_id

    输出：
      - MergedEphemeris（按 epoch 严格递增，每个 epoch 唯一）

    去重语义（Frozen）：
      - 以 epoch 为唯一 key
      - last-source-wins：同一 epoch 后处理的 sample 覆盖先处理的
        （同一输入内部的重复 epoch 同样适用）
      - 去重之后再排序，排序 key 只有 epoch，无二级 tie-break

    设计原则：
      - 纯计算，不修改输入
      - 不插值，不检测缺口，cadence 不规则原样保留
      - 不做 frame / time system 转换；不一致直接报错
      - “至少要有一个 sample” 不是本 Engine 的职责
    """

    def execute(self, inputs: Sequence[ObjectEphemeris], object_id: str) -> MergedEphemeris:
        matching = [e for e in inputs if e.object_id == object_id]

        if inputs and not matching:
            raise ObjectNotFoundError(
                f"object {object_id!r} not present in any of {len(inputs)} inputs"
            )

        skipped = len(inputs) - len(matching)
        if skipped:
            logs.warning(f"[MergeEngine] skipped {skipped} inputs for other objects")

        if not matching:
            return MergedEphemeris(object_id=object_id, frame=None, time_system=None)

        frame, time_system = self._assert_uniform(matching)

        samples = [s for eph in matching for s in eph.samples]
        if not samples:
            return MergedEphemeris(object_id=object_id, frame=frame, time_system=time_system)

        # --------------------------------------------------
        # 1. epoch 去重（keep="last" == last-source-wins）
        # 2. stable sort by epoch
        # --------------------------------------------------
        table = pd.DataFrame(
            {
                "epoch": [s.epoch for s in samples],
                "pos": range(len(samples)),
            }
        )
        table = (
            table
            .drop_duplicates(subset="epoch", keep="last")
            .sort_values("epoch", kind="stable")
        )
        merged = tuple(samples[i] for i in table["pos"])

        logs.info(
            f"[MergeEngine] {object_id}: {len(samples)} samples from {len(matching)} inputs "
            f"→ {len(merged)} epochs ({len(samples) - len(merged)} overridden)"
        )

        return MergedEphemeris(
            object_id=object_id,
            frame=frame,
            time_system=time_system,
            samples=merged,
        )

    # --------------------------------------------------
    @staticmethod
    def _assert_uniform(inputs: Sequence[ObjectEphemeris]) -> tuple[str, str]:
        frames = list(dict.fromkeys(e.frame for e in inputs))
        if len(frames) > 1:
            raise EphemerisMismatchError(
                f"inputs use different reference frames: {frames}"
            )

        time_systems = list(dict.fromkeys(e.time_system for e in inputs))
        if len(time_systems) > 1:
            raise EphemerisMismatchError(
                f"inputs use different time systems: {time_systems}"
            )

        return frames[0], time_systems[0]
