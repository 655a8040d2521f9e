"""Unit tests for termshapes.config."""

from pathlib import Path

import pytest

from termshapes import config


def test_get_content_path(monkeypatch):
    """The content path is read from the environment."""
    monkeypatch.setenv(config.CONTENT_PATH_ENV, "exports/content.json")
    assert config.get_content_path() == Path("exports/content.json")


@pytest.mark.parametrize("value", [None, ""], ids=["unset", "empty"])
def test_get_content_path_not_set(monkeypatch, value):
    """An unset or empty variable raises ContentPathNotSetError."""
    if value is None:
        monkeypatch.delenv(config.CONTENT_PATH_ENV, raising=False)
    else:
        monkeypatch.setenv(config.CONTENT_PATH_ENV, value)
    with pytest.raises(config.ContentPathNotSetError):
        config.get_content_path()
