#!filepath: sp3merge/dataloader/sp3_reader.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from sp3merge.core.types import ObjectEphemeris, Sample, Sp3Document, Vector3
from sp3merge.dataloader.decompressor import Decompressor
from sp3merge.utils.datetime_utils import DateTimeUtils
from sp3merge.utils.errors import ParseError
from sp3merge.utils.logger import logs

KM_TO_M = 1000.0
DM_S_TO_M_S = 0.1

# SP3 列定义（0-based slice）
SAT_ID = slice(1, 4)
COL_X = slice(4, 18)
COL_Y = slice(18, 32)
COL_Z = slice(32, 46)

SAT_SLOT_START = 9
SAT_SLOT_WIDTH = 3
SATS_PER_LINE = 17

DEFAULT_TIME_SYSTEM = "GPS"


class Sp3Reader:
    """
    SP3-a/b/c/d 读取器（输入侧，pipeline 外部边界）

    输出：
      Sp3Document（文件级元数据 + {object_id: ObjectEphemeris}）

    约定：
      - 位置 km → m，速度 dm/s → m/s
      - 位置全为 0.000000 的记录视为缺失（SP3 规范），跳过
      - 时间不做任何尺度转换，time_system 仅作为标签透传
      - EP / EV（相关系数）行忽略
      - 任何格式错误 → ParseError（带行号），不做容错补救
    """

    def __init__(self, decompressor: Optional[Decompressor] = None):
        self.decompressor = decompressor or Decompressor()

    # ------------------------------------------------------------------
    def read(self, path: str | Path) -> Sp3Document:
        path = Path(path)
        text = self.decompressor.read_text(path)
        doc = self.parse(text, source=path.name)
        logs.info(
            f"[Sp3Reader] {path.name}: {len(doc.ephemerides)} objects, "
            f"{doc.num_epochs} epochs declared, frame={doc.coordinate_system} "
            f"time={doc.time_system}"
        )
        return doc

    # ------------------------------------------------------------------
    def parse(self, text: str, source: str = "<string>") -> Sp3Document:
        lines = text.splitlines()
        if not lines or not lines[0].startswith("#"):
            raise ParseError("missing '#' first header line", source, 1)

        first = lines[0]
        if len(first) < 31:
            raise ParseError("first header line too short", source, 1)

        version = first[1]
        pos_vel_flag = first[2]
        num_epochs = self._int(first[32:39], source, 1, default=0)
        coordinate_system = first[46:51].strip()
        agency = first[56:60].strip()

        sat_ids: List[str] = []
        time_system: Optional[str] = None

        # 逐行状态机
        current_epoch: Optional[datetime] = None
        records: Dict[str, List[Tuple[datetime, Vector3, Optional[Vector3]]]] = {}

        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            tag = line[0]

            if line.startswith("EOF"):
                break

            if line.startswith("++") or line.startswith("##") or line.startswith("/*"):
                continue

            if line.startswith("%c"):
                if time_system is None:
                    time_system = line[9:12].strip() or None
                continue

            if tag == "%":
                continue

            if tag == "+":
                sat_ids.extend(self._parse_sat_line(line))
                continue

            if tag == "*":
                try:
                    current_epoch = DateTimeUtils.parse_sp3_epoch(
                        " ".join(line[1:].split()[:6])
                    )
                except ValueError as e:
                    raise ParseError(str(e), source, line_no) from e
                continue

            if line.startswith("EP") or line.startswith("EV"):
                continue

            if tag == "P":
                if current_epoch is None:
                    raise ParseError("position record before any epoch", source, line_no)
                sat = line[SAT_ID].strip()
                xyz = self._vector(line, source, line_no)
                if xyz == (0.0, 0.0, 0.0):
                    continue
                position = tuple(v * KM_TO_M for v in xyz)
                records.setdefault(sat, []).append((current_epoch, position, None))
                continue

            if tag == "V":
                if current_epoch is None:
                    raise ParseError("velocity record before any epoch", source, line_no)
                sat = line[SAT_ID].strip()
                vxyz = self._vector(line, source, line_no)
                rows = records.get(sat)
                if not rows or rows[-1][0] != current_epoch:
                    # 位置缺失（0.0）时速度无归属
                    continue
                epoch, position, _ = rows[-1]
                rows[-1] = (epoch, position, tuple(v * DM_S_TO_M_S for v in vxyz))
                continue

            raise ParseError(f"unexpected record {line[:3]!r}", source, line_no)

        time_system = time_system or DEFAULT_TIME_SYSTEM

        # header 顺序在前，body 中出现但 header 未列出的追加在后
        ordered = list(dict.fromkeys(sat_ids + list(records)))
        undeclared = [s for s in records if s not in sat_ids]
        if undeclared:
            logs.warning(f"[Sp3Reader] {source}: satellites missing from header {undeclared}")

        ephemerides = {
            sat: ObjectEphemeris(
                object_id=sat,
                frame=coordinate_system,
                time_system=time_system,
                samples=tuple(
                    Sample(epoch=e, position=p, velocity=v)
                    for e, p, v in records.get(sat, [])
                ),
            )
            for sat in ordered
        }

        return Sp3Document(
            source=source,
            version=version,
            pos_vel_flag=pos_vel_flag,
            coordinate_system=coordinate_system,
            time_system=time_system,
            agency=agency,
            num_epochs=num_epochs,
            ephemerides=ephemerides,
        )

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_sat_line(line: str) -> List[str]:
        """'+    3   G01G02L51  0  0 ...' → ['G01', 'G02', 'L51']"""
        ids = []
        for j in range(SATS_PER_LINE):
            start = SAT_SLOT_START + j * SAT_SLOT_WIDTH
            sat = line[start:start + SAT_SLOT_WIDTH].strip()
            if sat and sat.strip("0"):
                ids.append(sat)
        return ids

    @staticmethod
    def _vector(line: str, source: str, line_no: int) -> Vector3:
        try:
            return float(line[COL_X]), float(line[COL_Y]), float(line[COL_Z])
        except ValueError as e:
            raise ParseError(f"bad coordinate field: {e}", source, line_no) from e

    @staticmethod
    def _int(text: str, source: str, line_no: int, default: int) -> int:
        text = text.strip()
        if not text:
            return default
        try:
            return int(text)
        except ValueError as e:
            raise ParseError(f"bad integer field {text!r}", source, line_no) from e
