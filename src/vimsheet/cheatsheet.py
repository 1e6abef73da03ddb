"""
Read-only access to scraped datasets for quick lookups.

Loading tolerates missing language files (a language simply has no data),
and grouping keeps the order in which categories appear on the cheat sheet.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from vimsheet.languages import Language
from vimsheet.models import CommandRecord, LanguageDataset
from vimsheet.writer import read_dataset

logger = logging.getLogger(__name__)


def load_datasets(data_dir: Path, languages: Iterable[Language]) -> Dict[str, LanguageDataset]:
    """
    Load every available language file from data_dir.

    Returns a dict keyed by lookup code (en, ko, ...). Missing files are
    skipped; unreadable ones are logged and skipped.
    """
    datasets: Dict[str, LanguageDataset] = {}

    for lang in languages:
        path = Path(data_dir) / lang.filename
        if not path.exists():
            continue
        try:
            datasets[lang.lookup_code] = read_dataset(path)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Failed to load {lang.lookup_code} data: {e}")

    return datasets


def group_by_category(commands: Iterable[CommandRecord]) -> Dict[str, List[CommandRecord]]:
    """Group commands by category in first-seen order."""
    groups: Dict[str, List[CommandRecord]] = {}
    for command in commands:
        groups.setdefault(command.category, []).append(command)
    return groups


def matches(command: CommandRecord, query: str) -> bool:
    """Case-insensitive substring match on keys, description and category."""
    needle = query.strip().casefold()
    if not needle:
        return True
    return any(
        needle in field.casefold()
        for field in (command.keys, command.description, command.category)
    )


def search(commands: Iterable[CommandRecord], query: str) -> List[CommandRecord]:
    """Commands matching query, in their original order."""
    return [c for c in commands if matches(c, query)]


def display_name(code: str, languages: Sequence[Language]) -> str:
    """Human-readable language name for a lookup code."""
    for lang in languages:
        if lang.lookup_code == code:
            return lang.name
    return code

