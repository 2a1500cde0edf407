"""Tests for docstore.core.exceptions."""

from docstore.core.exceptions import ConfigurationError, DocstoreError


def test_hierarchy():
    assert issubclass(ConfigurationError, DocstoreError)


def test_exception_message():
    err = ConfigurationError("missing key: store.utc_timestamps")
    assert "missing key" in str(err)


def test_catch_base():
    """Catching DocstoreError should catch all subtypes."""
    try:
        raise ConfigurationError("bad value")
    except DocstoreError as e:
        assert "bad value" in str(e)
