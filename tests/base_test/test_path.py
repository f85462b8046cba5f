#!filepath: tests/base_test/test_path.py
from pathlib import Path

from sp3merge import path as PathManager
from sp3merge.utils.path import DATA_DIR_ENV


def test_default_data_root(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert PathManager.data_root() == tmp_path / "orekit-data"


def test_data_root_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "orbits"))

    assert PathManager.data_root() == tmp_path / "orbits"


def test_set_data_root_overrides_env(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))
    PathManager.set_data_root(tmp_path / "cfg")

    assert PathManager.data_root() == (tmp_path / "cfg").resolve()

    PathManager.set_data_root(None)
    assert PathManager.data_root() == tmp_path / "env"


def test_resolve_input(tmp_path):
    PathManager.set_data_root(tmp_path)

    assert PathManager.resolve_input("cnes/a.sp3.gz") == tmp_path.resolve() / "cnes" / "a.sp3.gz"
    assert PathManager.resolve_input(tmp_path / "x.sp3") == tmp_path / "x.sp3"


def test_resolve_output_relative_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert PathManager.resolve_output("out/merged.sp3") == tmp_path.resolve() / "out" / "merged.sp3"


def test_default_config_file_exists():
    cfg = PathManager.default_config_file()

    assert isinstance(cfg, Path)
    assert cfg.name == "base.yml"
    assert cfg.is_file()
