from .base import BaseEngine
from .merge_engine import MergeEngine
from .sp3_writer_engine import Sp3WriterEngine

__all__ = ["BaseEngine", "MergeEngine", "Sp3WriterEngine"]
