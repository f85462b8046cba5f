#!filepath: sp3merge/dataloader/decompressor.py
import gzip
import zlib
from pathlib import Path
from typing import Union

import unlzw3

from sp3merge.utils.errors import InputAccessError
from sp3merge.utils.filesystem import FileSystem
from sp3merge.utils.logger import logs

GZIP_MAGIC = b"\x1f\x8b"
LZW_MAGIC = b"\x1f\x9d"


class Decompressor:
    """
    SP3 输入解压器：
    - .gz  → gzip
    - .Z   → Unix compress (LZW, unlzw3)
    - 其他 → 原样返回
    判断以文件头 magic bytes 为准，后缀只用于日志。
    """

    def read_bytes(self, src: Union[str, Path]) -> bytes:
        """
        读取并解压单个文件，返回解压后的字节。

        Raises
        ------
        InputAccessError
            文件不存在 / 无法读取 / 解压失败
        """
        src = Path(src)
        if not src.is_file():
            raise InputAccessError(f"Input file not found: {src}")

        try:
            raw = src.read_bytes()
        except OSError as e:
            raise InputAccessError(f"Cannot read {src}: {e}") from e

        logs.debug(
            f"[Decompress] {src.name} ({FileSystem.format_size(len(raw))})"
        )
        return self.decompress(raw, name=src.name)

    def decompress(self, raw: bytes, name: str = "<bytes>") -> bytes:
        if raw.startswith(GZIP_MAGIC):
            try:
                data = gzip.decompress(raw)
            except (OSError, EOFError, zlib.error) as e:
                raise InputAccessError(f"Cannot gunzip {name}: {e}") from e
            logs.debug(f"[Decompress] gzip {name} → {FileSystem.format_size(len(data))}")
            return data

        if raw.startswith(LZW_MAGIC):
            try:
                data = bytes(unlzw3.unlzw(raw))
            except Exception as e:
                # unlzw3 的错误类型随输入不同而不同（ValueError / IndexError ...）
                raise InputAccessError(f"Cannot uncompress {name}: {e}") from e
            logs.debug(f"[Decompress] LZW {name} → {FileSystem.format_size(len(data))}")
            return data

        return raw

    def read_text(self, src: Union[str, Path]) -> str:
        """SP3 为纯 ASCII；非 ASCII 字节替换掉，交给 parser 报错。"""
        return self.read_bytes(src).decode("ascii", errors="replace")
