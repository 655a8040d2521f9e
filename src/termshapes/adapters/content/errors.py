"""Errors raised while loading content files."""

from pathlib import Path


class ContentFileError(Exception):
    """Base class for content file errors."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        if message is None:
            message = f"Cannot load content file {path}"
        super().__init__(message)
        self.path = path


class ContentFileNotFoundError(ContentFileError):
    """Raised when the content file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Content file {path} not found")


class InvalidContentFileError(ContentFileError):
    """Raised when the content file is not a valid content document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"Invalid content file {path}: {reason}")
        self.reason = reason
