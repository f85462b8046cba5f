#!filepath: tests/base_test/test_app_config.py
import yaml
import pytest
from pathlib import Path

from sp3merge.config import AppConfig, HeaderConfig, LogConfig, MergeConfig, RecordFormatConfig
from sp3merge.utils.errors import ConfigurationError


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "measurementFiles": ["cnes/a.sp3.gz", "cnes/b.sp3.gz"],
        "outputFileName": "merged.sp3",
        "dataDir": "orbits",
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG"
        },
        "header": {"agency": "IGS", "num_epochs": 96},
        "format": {"position_marker": "P", "velocity_marker": "V", "satellite_list_marker": ""},
        "instrumentation": False,
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.merge, MergeConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.header, HeaderConfig)
    assert isinstance(cfg.record_format, RecordFormatConfig)

    assert cfg.merge.measurement_files == ["cnes/a.sp3.gz", "cnes/b.sp3.gz"]
    assert cfg.merge.output_file_name == "merged.sp3"
    assert cfg.log.level == "DEBUG"
    assert cfg.header.agency == "IGS"
    assert cfg.header.coordinate_system == "ITRF"
    assert cfg.record_format.position_marker == "P"
    assert cfg.instrumentation is False


def test_relative_data_dir_resolves_against_config_file(sample_config_file):
    cfg = AppConfig.load(sample_config_file)

    assert Path(cfg.merge.data_dir) == (sample_config_file.parent / "orbits").resolve()


def test_absolute_data_dir_is_kept(tmp_path):
    cfg = AppConfig.from_dict(
        {"measurementFiles": ["a"], "outputFileName": "o", "dataDir": str(tmp_path)},
        base_dir=Path("/elsewhere"),
    )

    assert cfg.merge.data_dir == str(tmp_path)


def test_snake_case_keys_are_accepted():
    cfg = AppConfig.from_dict(
        {"measurement_files": ["a.sp3"], "output_file_name": "o.sp3", "object_id": "L51"}
    )

    assert cfg.merge.measurement_files == ["a.sp3"]
    assert cfg.merge.object_id == "L51"


def test_defaults_when_sections_missing():
    cfg = AppConfig.from_dict({"measurementFiles": ["a"], "outputFileName": "o"})

    assert cfg.merge.data_dir is None
    assert cfg.merge.object_id is None
    assert cfg.log.dir is None
    assert cfg.header.agency == "CNES"
    assert cfg.record_format.missing_velocity == "error"
    assert cfg.instrumentation is True


def test_shipped_base_config_loads():
    cfg = AppConfig.load()

    assert cfg.merge.measurement_files
    assert cfg.header.num_epochs == 30413
    assert cfg.record_format.velocity_marker == "VL"


# -----------------------------------------------------------------------------
# 错误
# -----------------------------------------------------------------------------
def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        AppConfig.load(tmp_path / "nope.yml")


def test_empty_file_raises(tmp_path):
    p = tmp_path / "empty.yml"
    p.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="empty"):
        AppConfig.load(p)


def test_malformed_yaml_raises(tmp_path):
    p = tmp_path / "bad.yml"
    p.write_text("measurementFiles: [a, b\noutputFileName: x", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Malformed"):
        AppConfig.load(p)


def test_non_mapping_root_raises():
    with pytest.raises(ConfigurationError):
        AppConfig.from_dict(["a", "b"])


@pytest.mark.parametrize(
    "raw",
    [
        {"outputFileName": "o"},
        {"measurementFiles": [], "outputFileName": "o"},
        {"measurementFiles": ["a"]},
        {"measurementFiles": ["a"], "outputFileName": "o", "format": {"missing_velocity": "guess"}},
        {"measurementFiles": ["a"], "outputFileName": "o", "header": {"comments": ["only one"]}},
        {"measurementFiles": ["a"], "outputFileName": "o", "objectId": "L5"},
    ],
)
def test_invalid_values_raise(raw):
    with pytest.raises(ConfigurationError):
        AppConfig.from_dict(raw)
