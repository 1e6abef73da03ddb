"""Exception types raised by vimsheet."""

from __future__ import annotations

from pathlib import Path


class VimSheetError(Exception):
    """Base class for all vimsheet errors."""


class FetchError(VimSheetError):
    """Retrieving a cheat sheet page failed (transport error or bad status)."""

    def __init__(self, url: str, cause: BaseException | str):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class DatasetWriteError(VimSheetError, OSError):
    """Creating the output directory or writing a dataset file failed."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class ConfigError(VimSheetError):
    """The language configuration is missing or malformed."""
