from .decompressor import Decompressor
from .sp3_reader import Sp3Reader

__all__ = ["Decompressor", "Sp3Reader"]
