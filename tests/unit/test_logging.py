"""Test logging setup."""

from pathlib import Path

from loguru import logger

from schedtime import parse
from schedtime.utils import setup_logger


def test_setup_logger_console_only():
    try:
        handler_ids = setup_logger(log_level="DEBUG")
        assert len(handler_ids) == 1
    finally:
        logger.remove()


def test_file_sink_keeps_package_records(tmp_path: Path):
    try:
        handler_ids = setup_logger(log_level="INFO", log_to_file=True, log_dir=tmp_path)
        assert len(handler_ids) == 2

        parse("garbage", "yyyy-MM-dd")
        logger.error("unrelated application error")
    finally:
        logger.remove()

    content = (tmp_path / "schedtime.log").read_text()
    assert "Error while parsing date 'garbage'" in content
    assert "unrelated application error" not in content
