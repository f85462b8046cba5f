#!filepath: tests/base_test/test_logger.py
import pytest
from loguru import logger

from sp3merge.utils.logger import init_logging, logs


@pytest.fixture
def captured():
    messages = []
    sink_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG")
    yield messages
    logger.remove(sink_id)


def test_catch_logs_and_reraises(captured):
    @logs.catch(msg="boom failed")
    def boom():
        raise ValueError("x")

    with pytest.raises(ValueError):
        boom()

    assert any("boom failed" in m for m in captured)


def test_catch_returns_result(captured):
    @logs.catch(log_outputs=True)
    def add(a, b):
        return a + b

    assert add(1, 2) == 3
    assert any("result=3" in m for m in captured)


def test_init_logging_with_file_sink(tmp_path):
    log_dir = tmp_path / "logs"

    init_logging(log_dir=str(log_dir), level="DEBUG")
    logs.info("hello file sink")
    logger.remove()

    files = list(log_dir.glob("sp3merge_*.log"))
    assert len(files) == 1
    assert "hello file sink" in files[0].read_text(encoding="utf-8")
