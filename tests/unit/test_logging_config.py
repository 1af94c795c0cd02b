"""
Tests pour configure_logging (loguru).
"""

import json
import sys

import pytest
from loguru import logger

from hicinema.config import Settings
from hicinema.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_handler_writes_json(test_settings: Settings) -> None:
    configure_logging(test_settings)

    logger.info("Chargement popular page 1")
    logger.remove()  # vide la file des handlers enqueue

    lines = test_settings.log_file.read_text(encoding="utf-8").splitlines()
    records = [json.loads(line)["record"] for line in lines]
    assert "Chargement popular page 1" in [record["message"] for record in records]


def test_file_captures_debug_regardless_of_console_level(tmp_path) -> None:
    settings = Settings(_env_file=None, log_level="WARNING", log_file=tmp_path / "logs" / "app.log")
    configure_logging(settings)

    logger.debug("Tables modifiees: ['movies']")
    logger.remove()

    assert "Tables modifiees" in settings.log_file.read_text(encoding="utf-8")
