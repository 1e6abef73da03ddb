"""
Data model for scraped cheat sheet data.

A LanguageDataset is the unit written to disk: one per language, holding the
commands in scrape order plus the time the fetch completed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List


@dataclass(frozen=True)
class CommandRecord:
    """One keybinding entry from the cheat sheet."""
    keys: str
    description: str
    category: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "keys": self.keys,
            "description": self.description,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "CommandRecord":
        if not isinstance(d, dict):
            raise ValueError(f"Command entry must be an object, got {type(d).__name__}")
        return cls(
            keys=d.get("keys", ""),
            description=d.get("description", ""),
            category=d.get("category", ""),
        )


@dataclass
class LanguageDataset:
    """All commands scraped for one language."""
    commands: List[CommandRecord] = field(default_factory=list)
    last_updated: str = ""

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization (commands first)."""
        return {
            "commands": [c.to_dict() for c in self.commands],
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "LanguageDataset":
        if not isinstance(d, dict):
            raise ValueError(f"Dataset must be an object, got {type(d).__name__}")
        commands = d.get("commands", [])
        if not isinstance(commands, list):
            raise ValueError(f"'commands' must be a list, got {type(commands).__name__}")
        return cls(
            commands=[CommandRecord.from_dict(c) for c in commands],
            last_updated=d.get("lastUpdated", ""),
        )


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC timestamp as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
