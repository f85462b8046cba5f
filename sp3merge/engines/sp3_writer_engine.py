#!filepath: sp3merge/engines/sp3_writer_engine.py
from __future__ import annotations

import io
from typing import Callable, Iterator, List, Optional, TextIO, Tuple

from sp3merge.config.format_config import RecordFormatConfig
from sp3merge.config.header_config import HeaderConfig
from sp3merge.core.types import MergedEphemeris, Sample
from sp3merge.engines.base import BaseEngine
from sp3merge.utils.datetime_utils import DateTimeUtils
from sp3merge.utils.errors import MissingVelocityError
from sp3merge.utils.logger import logs

NEW_LINE = "\n"
ZERO_SLOT = "  0"

M_PER_KM = 1000.0
DM_PER_M = 10.0

HEADER_LINE_COUNT = 22

HeaderLine = Callable[[HeaderConfig, RecordFormatConfig, str], str]


# ============================================================
# Header line builders（纯函数，顺序即版面）
# ============================================================
def _first_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return (
        f"#{h.version}{h.pos_vel_flag}{DateTimeUtils.format_sp3_epoch(h.start_epoch)}"
        f" {h.num_epochs:7d} {h.data_used:5s} {h.coordinate_system:5s}"
        f" {h.orbit_type:3s} {h.agency:4s}"
    )


def _second_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return (
        f"## {h.gps_week:4d} {h.seconds_of_week:15.8f} {h.epoch_interval:14.8f}"
        f" {h.mjd:5d} {h.fractional_day:15.13f}"
    )


def _satellite_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    # 只建模一颗卫星：count 固定为 1
    return f"+ {1:4d}   {f.satellite_list_marker}{object_id}" + ZERO_SLOT * 16


def _empty_satellite_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "+        " + ZERO_SLOT * 17


def _accuracy_blank_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "++"


def _accuracy_zero_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "++       " + ZERO_SLOT * 17


def _file_type_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return (
        f"%c {h.file_type}  cc {h.time_system}"
        " ccc cccc cccc cccc cccc ccccc ccccc ccccc ccccc"
    )


def _char_placeholder_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "%c cc cc ccc ccc cccc cccc cccc cccc ccccc ccccc ccccc ccccc"


def _base_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return (
        f"%f {h.base_pos_vel:10.7f} {h.base_clk_rate:12.9f}"
        "  0.00000000000  0.000000000000000"
    )


def _float_placeholder_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "%f  0.0000000  0.000000000  0.00000000000  0.000000000000000"


def _int_placeholder_line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
    return "%i    0    0    0    0      0      0      0      0         0"


def _comment_line(index: int) -> HeaderLine:
    def _line(h: HeaderConfig, f: RecordFormatConfig, object_id: str) -> str:
        return f"/* {h.comments[index]}"

    return _line


HEADER_LINES: Tuple[HeaderLine, ...] = (
    _first_line,                    # 1
    _second_line,                   # 2
    _satellite_line,                # 3
    _empty_satellite_line,          # 4
    _empty_satellite_line,          # 5
    _empty_satellite_line,          # 6
    _empty_satellite_line,          # 7
    _accuracy_blank_line,           # 8
    _accuracy_blank_line,           # 9
    _accuracy_zero_line,            # 10
    _accuracy_zero_line,            # 11
    _accuracy_zero_line,            # 12
    _file_type_line,                # 13
    _char_placeholder_line,         # 14
    _base_line,                     # 15
    _float_placeholder_line,        # 16
    _int_placeholder_line,          # 17
    _int_placeholder_line,          # 18
    _comment_line(0),               # 19
    _comment_line(1),               # 20
    _comment_line(2),               # 21
    _comment_line(3),               # 22
)


class Sp3WriterEngine(BaseEngine):
    """
    Sp3WriterEngine（冻结版）

    输出版面：
      - 22 行 header（HeaderConfig 提供字段，不从数据推导）
      - 每个 sample 3 行：epoch / position (km) / velocity (dm/s)
      - 结束标记 EOF（无换行）

    数值格式：
      - F14.6 / F11.8 固定列宽
      - 只用 Python format spec → 与 host locale 无关，小数点永远是 '.'

    设计原则：
      - sink 由调用方打开 / 关闭，本 Engine 只负责写
      - 写失败（OSError）原样抛出，不做清理
    """

    def __init__(
        self,
        header: Optional[HeaderConfig] = None,
        fmt: Optional[RecordFormatConfig] = None,
    ):
        self.header = header or HeaderConfig()
        self.fmt = fmt or RecordFormatConfig()

    # --------------------------------------------------
    def execute(self, sink: TextIO, ephemeris: MergedEphemeris) -> int:
        """
        写入完整 SP3 文档，返回写出的 epoch 数。
        """
        written = 0
        for line in self.header_lines(ephemeris.object_id):
            sink.write(line + NEW_LINE)

        for sample in ephemeris.samples:
            for line in self.record_lines(ephemeris.object_id, sample):
                sink.write(line + NEW_LINE)
            written += 1

        sink.write(self.fmt.end_marker)

        logs.debug(f"[Sp3Writer] {ephemeris.object_id}: {written} epochs written")
        return written

    write = execute

    def render(self, ephemeris: MergedEphemeris) -> str:
        buf = io.StringIO()
        self.execute(buf, ephemeris)
        return buf.getvalue()

    def check_writable(self, ephemeris: MergedEphemeris) -> None:
        """
        写出前的整体检查：policy 为 error 且存在缺速度的 sample 时直接抛出，
        调用方据此可以在打开 sink 之前失败。
        """
        if self.fmt.missing_velocity != "error":
            return
        missing = [s.epoch for s in ephemeris.samples if s.velocity is None]
        if missing:
            raise MissingVelocityError(
                f"{ephemeris.object_id}: {len(missing)} of {len(ephemeris)} epochs have no velocity "
                f"(first at {missing[0].isoformat()}); set format.missing_velocity to zero or omit"
            )

    # --------------------------------------------------
    # header
    # --------------------------------------------------
    def header_lines(self, object_id: str) -> Iterator[str]:
        for build in HEADER_LINES:
            yield build(self.header, self.fmt, object_id)

    # --------------------------------------------------
    # body
    # --------------------------------------------------
    def record_lines(self, object_id: str, sample: Sample) -> List[str]:
        """
        单个 epoch 的记录行；缺速度时按 missing_velocity 策略处理，
        策略为 error 时在写出任何一行之前抛出。
        """
        velocity = sample.velocity
        if velocity is None:
            policy = self.fmt.missing_velocity
            if policy == "error":
                raise MissingVelocityError(
                    f"{object_id} at {sample.epoch.isoformat()} has no velocity"
                )
            if policy == "zero":
                velocity = (0.0, 0.0, 0.0)

        lines = [
            f"{self.fmt.epoch_marker}{DateTimeUtils.format_sp3_epoch(sample.epoch)}",
            self._vector_line(
                self.fmt.position_marker, object_id,
                [v / M_PER_KM for v in sample.position],
            ),
        ]
        if velocity is not None:
            lines.append(
                self._vector_line(
                    self.fmt.velocity_marker, object_id,
                    [v * DM_PER_M for v in velocity],
                )
            )
        return lines

    def _vector_line(self, marker: str, object_id: str, values: List[float]) -> str:
        fields = "".join(f"{v:14.6f}" for v in values)
        return f"{marker}{object_id}{fields} {self.fmt.clock_placeholder}"
