"""Configuration utilities for termshapes.

This module centralizes small helpers and constants related to configuration.
"""

import os
from pathlib import Path

CONTENT_PATH_ENV = "TERMSHAPES_CONTENT_PATH"  # pragma: no mutate

DEFAULT_DISPLAY_TYPE = "Detail"


class ContentPathNotSetError(Exception):
    """Raised when the TERMSHAPES_CONTENT_PATH environment variable is not set."""


def get_content_path() -> Path:
    """Get the default content file path from the environment.

    Returns:
        The value of the `TERMSHAPES_CONTENT_PATH` environment variable.

    Raises:
        ContentPathNotSetError: If `TERMSHAPES_CONTENT_PATH` is not set.
    """
    if not (path := os.environ.get(CONTENT_PATH_ENV)):
        raise ContentPathNotSetError
    return Path(path)
