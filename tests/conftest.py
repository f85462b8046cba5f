# tests/conftest.py
from __future__ import annotations

import gzip
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from loguru import logger

from sp3merge.core.types import ObjectEphemeris, Sample
from sp3merge.utils.path import DATA_DIR_ENV, PathManager

T0 = datetime(2014, 1, 4, 0, 0, 0)

# (position m, velocity m/s or None)
State = Tuple[Tuple[float, float, float], Optional[Tuple[float, float, float]]]


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def _isolate_data_root(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    PathManager.set_data_root(None)
    yield
    PathManager.set_data_root(None)


# ============================================================
# in-memory samples
# ============================================================
def epoch_at(minute: float) -> datetime:
    return T0 + timedelta(minutes=minute)


@pytest.fixture
def make_sample():
    """
    make_sample(minute, x=...) → Sample

    position = (x, x + 1, x + 2)，用 x 区分不同来源
    """

    def _make(minute: float, x: float = 7_000_000.0, velocity=(1.0, 2.0, 3.0)) -> Sample:
        return Sample(epoch=epoch_at(minute), position=(x, x + 1.0, x + 2.0), velocity=velocity)

    return _make


@pytest.fixture
def make_ephemeris(make_sample):
    def _make(
        minutes: Sequence[float],
        x: float = 7_000_000.0,
        object_id: str = "L51",
        frame: str = "ITRF",
        time_system: str = "GPS",
    ) -> ObjectEphemeris:
        return ObjectEphemeris(
            object_id=object_id,
            frame=frame,
            time_system=time_system,
            samples=tuple(make_sample(m, x=x) for m in minutes),
        )

    return _make


# ============================================================
# SP3 text
# ============================================================
def _xyz(values) -> str:
    return "".join(f"{v:14.6f}" for v in values)


def build_sp3(
    records: List[Tuple[datetime, Dict[str, State]]],
    sats: Optional[List[str]] = None,
    coord: str = "ITRF",
    time_system: str = "GPS",
) -> str:
    """
    标准 SP3-c 文本（单字符 P / V 记录，位置 km，速度 dm/s）
    """
    if sats is None:
        sats = list(dict.fromkeys(s for _, states in records for s in states))

    start = records[0][0] if records else T0

    def ep(dt: datetime) -> str:
        sec = dt.second + dt.microsecond / 1e6
        return f"{dt.year:4d} {dt.month:2d} {dt.day:2d} {dt.hour:2d} {dt.minute:2d} {sec:11.8f}"

    lines = [
        f"#cV{ep(start)} {len(records):7d} ORBIT {coord:5s} FIT TEST",
        "## 1773      0.00000000    60.00000000 56661 0.0000000000000",
        f"+ {len(sats):4d}   " + "".join(f"{s:>3s}" for s in sats) + "  0" * (17 - len(sats)),
        "++       " + "  0" * 17,
        f"%c M  cc {time_system:3s} ccc cccc cccc cccc cccc ccccc ccccc ccccc ccccc",
        "%c cc cc ccc ccc cccc cccc cccc cccc ccccc ccccc ccccc ccccc",
        "%f  1.2500000  1.025000000  0.00000000000  0.000000000000000",
        "%i    0    0    0    0      0      0      0      0         0",
        "/* test fixture",
    ]

    for epoch, states in records:
        lines.append(f"*  {ep(epoch)}")
        for sat, (pos, vel) in states.items():
            lines.append(f"P{sat}" + _xyz(v / 1000.0 for v in pos) + "      0.000000")
            if vel is not None:
                lines.append(f"V{sat}" + _xyz(v * 10.0 for v in vel) + "      0.000000")

    lines.append("EOF")
    return "\n".join(lines) + "\n"


def track(minutes: Sequence[float], sat: str = "L51", x: float = 7_000_000.0):
    """单颗卫星的 records，position x 带 minute 偏移，方便断言来源。"""
    return [
        (epoch_at(m), {sat: ((x + m, -2_000_000.0, 3_000_000.0), (1.5, -2.5, 0.25))})
        for m in minutes
    ]


@pytest.fixture
def sp3_text():
    return build_sp3


@pytest.fixture
def write_sp3(tmp_path: Path):
    """
    write_sp3(name, records, gz=False, **kw) → Path
    """

    def _write(name: str, records, gz: bool = False, **kw) -> Path:
        text = build_sp3(records, **kw)
        path = tmp_path / name
        if gz:
            path.write_bytes(gzip.compress(text.encode("ascii")))
        else:
            path.write_text(text, encoding="ascii")
        return path

    return _write


@pytest.fixture
def make_track():
    return track


@pytest.fixture
def at():
    return epoch_at
