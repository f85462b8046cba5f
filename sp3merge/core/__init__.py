"""
Core Ephemeris Model (FINAL / FROZEN)

Defines WHAT an ephemeris is, independent of any file format, engine, or pipeline.

Invariants:
- Positions are meters, velocities are meters/second.
- Epochs are naive datetimes in the time system of their ephemeris.
- Samples are immutable; merging always builds new values.

Core explicitly does NOT:
- Perform IO or parsing
- Convert between frames or time systems
"""
from .types import MergedEphemeris, ObjectEphemeris, Sample, Sp3Document

__all__ = ["Sample", "ObjectEphemeris", "MergedEphemeris", "Sp3Document"]
