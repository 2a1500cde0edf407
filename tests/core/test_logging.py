"""Tests for docstore.core.utils.logging."""

import os

import pytest
from loguru import logger

from docstore.core.config import Config
from docstore.core.utils.logging import setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def _restore_loguru():
    yield
    logger.remove()


def test_setup_logging_writes_file(tmp_dir):
    log_file = os.path.join(tmp_dir, "docstore.log")
    setup_logging(level="INFO", log_file=log_file)

    logger.info("stored something")
    logger.debug("hidden detail")
    logger.complete()

    with open(log_file) as f:
        text = f.read()
    assert "stored something" in text
    assert "hidden detail" not in text


def test_setup_logging_from_config(tmp_dir):
    log_file = os.path.join(tmp_dir, "from-config.log")
    config = Config(env_prefix="", defaults={"logging": {"level": "debug", "file": log_file}})
    setup_logging_from_config(config)

    logger.debug("debug line")
    logger.complete()

    with open(log_file) as f:
        assert "debug line" in f.read()
