#!filepath: sp3merge/utils/path.py
import os
from pathlib import Path
from typing import Optional

from sp3merge.utils.logger import logs

DATA_DIR_ENV = "SP3MERGE_DATA_DIR"


class PathManager:
    """
    目录约定：

    ~/orekit-data/                 ← 默认 data root（可用 SP3MERGE_DATA_DIR / dataDir 覆盖）
     ├── <center>/xxx.sp3.gz       ← measurementFiles 中的相对路径
     └── ...

    <package>/config/base.yml      ← 默认配置模板

    输出文件（outputFileName）相对于当前工作目录解析。
    """

    _data_root: Optional[Path] = None

    # ---------------------------------------------------------
    # data root
    # ---------------------------------------------------------
    @classmethod
    def detect_data_root(cls) -> Path:
        """
        优先级：
            1) 环境变量 SP3MERGE_DATA_DIR
            2) ~/orekit-data
        """
        env = os.getenv(DATA_DIR_ENV)
        if env:
            root = Path(env).expanduser()
            logs.debug(f"[PathManager] data root from ${DATA_DIR_ENV} = {root}")
            return root

        root = Path.home() / "orekit-data"
        logs.debug(f"[PathManager] default data root = {root}")
        return root

    @classmethod
    def data_root(cls) -> Path:
        if cls._data_root is None:
            return cls.detect_data_root()
        return cls._data_root

    @classmethod
    def set_data_root(cls, new_root: Path | str | None):
        if new_root is None:
            cls._data_root = None
        else:
            cls._data_root = Path(new_root).expanduser().resolve()
        logs.debug(f"[PathManager] set_data_root = {cls._data_root}")

    # ---------------------------------------------------------
    # inputs / outputs
    # ---------------------------------------------------------
    @classmethod
    def resolve_input(cls, name: str | Path) -> Path:
        """相对路径挂到 data root 下，绝对路径原样返回。"""
        p = Path(name).expanduser()
        if p.is_absolute():
            return p
        return cls.data_root() / p

    @classmethod
    def resolve_output(cls, name: str | Path) -> Path:
        return Path(name).expanduser().resolve()

    # ---------------------------------------------------------
    # config
    # ---------------------------------------------------------
    @classmethod
    def package_config_dir(cls) -> Path:
        """包内配置：sp3merge/config/"""
        return Path(__file__).resolve().parents[1] / "config"

    @classmethod
    def default_config_file(cls) -> Path:
        return cls.package_config_dir() / "base.yml"
