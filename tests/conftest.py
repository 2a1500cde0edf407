"""Shared test fixtures for docstore."""

import os
import tempfile
from datetime import UTC, datetime

import pytest

from docstore.documents import InMemoryDocumentStore, StoreConfig


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "store": {"utc_timestamps": False},
        "logging": {"level": "DEBUG"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def frozen_store(fixed_now):
    """A store whose clock always returns ``fixed_now``."""
    return InMemoryDocumentStore(StoreConfig(clock=lambda: fixed_now))
