#!filepath: sp3merge/core/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import pandas as pd

Vector3 = Tuple[float, float, float]

FRAME_COLUMNS = ["epoch", "x", "y", "z", "vx", "vy", "vz"]


@dataclass(frozen=True)
class Sample:
    """
    One state of one object at one epoch.

    position in meters, velocity in meters/second (None when the source
    file carries positions only). epoch is naive, in the time system of the
    owning ephemeris.
    """
    epoch: datetime
    position: Vector3
    velocity: Optional[Vector3] = None

    @property
    def has_velocity(self) -> bool:
        return self.velocity is not None


@dataclass(frozen=True)
class ObjectEphemeris:
    """Samples of one object from one source, in source order."""
    object_id: str
    frame: str
    time_system: str
    samples: Tuple[Sample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def start(self) -> Optional[datetime]:
        return min((s.epoch for s in self.samples), default=None)

    @property
    def stop(self) -> Optional[datetime]:
        return max((s.epoch for s in self.samples), default=None)


@dataclass(frozen=True)
class MergedEphemeris:
    """
    MergedEphemeris（合并结果）

    不变式：
      - samples 按 epoch 严格递增
      - 同一 epoch 至多一个 sample
      - frame / time_system 仅在“没有任何匹配输入”时为 None
    """
    object_id: str
    frame: Optional[str]
    time_system: Optional[str]
    samples: Tuple[Sample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def start(self) -> Optional[datetime]:
        return self.samples[0].epoch if self.samples else None

    @property
    def stop(self) -> Optional[datetime]:
        return self.samples[-1].epoch if self.samples else None

    def to_frame(self) -> pd.DataFrame:
        """epoch + position (m) + velocity (m/s)，缺速度的行为 NaN。"""
        rows = []
        for s in self.samples:
            vx, vy, vz = s.velocity if s.velocity is not None else (float("nan"),) * 3
            rows.append((s.epoch, *s.position, vx, vy, vz))
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)


@dataclass
class Sp3Document:
    """
    Parsed SP3 file: file-level metadata + per-object ephemerides.

    ephemerides keeps header order, so the first key is the first satellite
    listed by the file.
    """
    source: str
    version: str
    pos_vel_flag: str
    coordinate_system: str
    time_system: str
    agency: str
    num_epochs: int
    ephemerides: Dict[str, ObjectEphemeris] = field(default_factory=dict)

    @property
    def object_ids(self) -> List[str]:
        return list(self.ephemerides)

    @property
    def start(self) -> Optional[datetime]:
        return min((e.start for e in self.ephemerides.values() if len(e)), default=None)

    @property
    def stop(self) -> Optional[datetime]:
        return max((e.stop for e in self.ephemerides.values() if len(e)), default=None)

    def get(self, object_id: str) -> Optional[ObjectEphemeris]:
        return self.ephemerides.get(object_id)
