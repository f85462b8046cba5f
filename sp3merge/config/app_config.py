#!filepath: sp3merge/config/app_config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .log_config import LogConfig
from .merge_config import MergeConfig
from .header_config import HeaderConfig
from .format_config import RecordFormatConfig
from sp3merge.utils.errors import ConfigurationError
from sp3merge.utils.logger import logs
from sp3merge.utils.path import PathManager

# 顶层 key 中属于独立 section 的部分，其余 key 归入 MergeConfig
_SECTIONS = ("log", "header", "format", "instrumentation")


class AppConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    merge: MergeConfig
    log: LogConfig = Field(default_factory=LogConfig)
    header: HeaderConfig = Field(default_factory=HeaderConfig)
    record_format: RecordFormatConfig = Field(default_factory=RecordFormatConfig, alias="format")
    instrumentation: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], base_dir: Optional[Path] = None) -> "AppConfig":
        """
        YAML 结构（扁平，兼容历史配置）：

            measurementFiles: [a.sp3.gz, b.sp3.gz]
            outputFileName: merged.sp3
            dataDir: data          # 可选，相对路径基于配置文件所在目录
            log: {...}             # 可选
            header: {...}          # 可选
            format: {...}          # 可选
        """
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config root must be a mapping, got {type(raw).__name__}")

        raw = dict(raw)
        sections = {key: raw.pop(key) for key in _SECTIONS if key in raw}

        data_dir = raw.get("dataDir", raw.get("data_dir"))
        if data_dir and base_dir is not None and not os.path.isabs(os.path.expanduser(data_dir)):
            resolved = str((base_dir / data_dir).resolve())
            raw.pop("data_dir", None)
            raw["dataDir"] = resolved

        try:
            return cls(merge=raw, **sections)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration:\n{e}") from e

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 sp3merge/config/base.yml
        - .env 从配置文件所在目录加载（不覆盖已有环境变量）
        """
        if path is None:
            path = PathManager.default_config_file()
        path = Path(path).expanduser()

        if not path.is_file():
            raise ConfigurationError(f"Config file not found: {path}")

        load_dotenv(path.parent / ".env")

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

        if raw is None:
            raise ConfigurationError(f"Config file is empty: {path}")

        cfg = cls.from_dict(raw, base_dir=path.parent.resolve())
        logs.debug(f"[AppConfig] loaded {path} ({len(cfg.merge.measurement_files)} input files)")
        return cfg
