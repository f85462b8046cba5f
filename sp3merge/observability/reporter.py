#!filepath: sp3merge/observability/reporter.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sp3merge.core.types import ObjectEphemeris
from sp3merge.utils.logger import logs

# (source, frame, samples, start, stop)
SummaryRow = Tuple[str, str, int, Optional[datetime], Optional[datetime]]


class EphemerisReporter:
    """
    每个输入文件的诊断摘要（frame / sample 数 / 起止 epoch）。

    只写日志，不影响 pipeline 结果；rows 保留给调用方（CLI / 测试）。
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.rows: List[SummaryRow] = []

    def report(self, source: str, ephemeris: ObjectEphemeris):
        row = (source, ephemeris.frame, len(ephemeris), ephemeris.start, ephemeris.stop)
        self.rows.append(row)
        if not self.enabled:
            return
        logs.info(
            f"[Ephemeris] {source}: {ephemeris.object_id} frame={ephemeris.frame} "
            f"samples={len(ephemeris)} start={_fmt(ephemeris.start)} stop={_fmt(ephemeris.stop)}"
        )

    def done(self, object_id: str):
        if not self.enabled:
            return
        total = sum(r[2] for r in self.rows)
        logs.info(f"[Ephemeris] {object_id}: {len(self.rows)} inputs, {total} samples before merge")


def _fmt(epoch: Optional[datetime]) -> str:
    return epoch.isoformat(sep=" ") if epoch is not None else "-"
