"""
Dataset persistence.

Each language is stored as pretty-printed JSON with a fixed field order
(commands before lastUpdated; keys, description, category per command) so
successive scrapes diff cleanly. Files are replaced whole through a temp file,
never appended or partially written.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import orjson

from vimsheet.errors import DatasetWriteError
from vimsheet.models import LanguageDataset

logger = logging.getLogger(__name__)

JSON_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE


def dump_dataset(dataset: LanguageDataset) -> bytes:
    """Serialize a dataset to its on-disk bytes."""
    return orjson.dumps(dataset.to_dict(), option=JSON_OPTIONS)


def write_dataset(path: Path, dataset: LanguageDataset) -> Path:
    """Atomically write a dataset to path, creating parent directories."""
    payload = dump_dataset(dataset)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatasetWriteError(path.parent, e) from e

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(payload)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise DatasetWriteError(path, e) from e

    logger.debug(f"Wrote {len(dataset.commands)} commands to {path}")
    return path


def read_dataset(path: Path) -> LanguageDataset:
    """Load a dataset file written by write_dataset."""
    with open(path, "rb") as f:
        return LanguageDataset.from_dict(orjson.loads(f.read()))


class DatasetWriter:
    """Writes per-language dataset files into one output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def path_for(self, filename: str) -> Path:
        return self.output_dir / filename

    def write(self, filename: str, dataset: LanguageDataset) -> Path:
        return write_dataset(self.path_for(filename), dataset)

    def read(self, filename: str) -> LanguageDataset:
        return read_dataset(self.path_for(filename))
