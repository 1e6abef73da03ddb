"""
Language configuration.

The set of languages to scrape is data, not code: it is read from
schema/languages.yaml and handed to the orchestrator as an explicit sequence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

import yaml

from vimsheet.errors import ConfigError
from vimsheet.fetcher import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

# Find project root (from src/vimsheet/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "schema" / "languages.yaml"
DEFAULT_OUTPUT_DIR = "data"

# Pause between languages, in seconds
DEFAULT_DELAY = 0.5


@dataclass(frozen=True)
class Language:
    """One cheat sheet language: URL code, display name, output filename."""
    code: str
    name: str
    filename: str

    @property
    def lookup_code(self) -> str:
        """Code used by the lookup side (output filename without extension)."""
        return Path(self.filename).stem


@dataclass
class ScrapeSettings:
    base_url: str = DEFAULT_BASE_URL
    output_dir: Path = field(default_factory=lambda: PROJECT_ROOT / DEFAULT_OUTPUT_DIR)
    delay_seconds: float = DEFAULT_DELAY
    timeout_seconds: float = DEFAULT_TIMEOUT


@dataclass
class ScrapeConfig:
    settings: ScrapeSettings
    languages: list[Language]


def parse_language(entry: Any, index: int) -> Language:
    """Build a Language from one YAML entry."""
    if not isinstance(entry, dict):
        raise ConfigError(f"Language entry #{index} is not a mapping: {entry!r}")

    filename = entry.get("filename")
    if not filename:
        raise ConfigError(f"Language entry #{index} is missing 'filename'")

    code = entry.get("code") or ""
    name = entry.get("name") or Path(filename).stem
    return Language(code=str(code), name=str(name), filename=str(filename))


def parse_config(data: dict[str, Any]) -> ScrapeConfig:
    """Build a ScrapeConfig from the loaded YAML document."""
    if not isinstance(data, dict):
        raise ConfigError("Language configuration must be a mapping")

    raw_settings = data.get("settings") or {}
    settings = ScrapeSettings()
    if "base_url" in raw_settings:
        settings.base_url = str(raw_settings["base_url"])
    if "output_dir" in raw_settings:
        settings.output_dir = PROJECT_ROOT / raw_settings["output_dir"]
    try:
        if "delay_seconds" in raw_settings:
            settings.delay_seconds = float(raw_settings["delay_seconds"])
        if "timeout_seconds" in raw_settings:
            settings.timeout_seconds = float(raw_settings["timeout_seconds"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    raw_languages = data.get("languages")
    if not raw_languages:
        raise ConfigError("No languages configured")

    languages = [parse_language(entry, i) for i, entry in enumerate(raw_languages, 1)]

    filenames = [lang.filename for lang in languages]
    duplicates = sorted({f for f in filenames if filenames.count(f) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate output filenames: {', '.join(duplicates)}")

    return ScrapeConfig(settings=settings, languages=languages)


def load_config(path: Path | None = None) -> ScrapeConfig:
    """Load scrape settings and languages from a YAML file."""
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise ConfigError(f"Language configuration not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    return parse_config(data)


def select_languages(languages: Sequence[Language], wanted: Iterable[str]) -> list[Language]:
    """
    Restrict languages to those named in wanted, keeping configured order.

    A name matches a language's lookup code (en, es) or its URL code (es_es).
    """
    wanted = list(wanted)
    if not wanted:
        return list(languages)

    unknown = [
        name for name in wanted
        if not any(name in (lang.lookup_code, lang.code) for lang in languages)
    ]
    if unknown:
        raise ConfigError(f"Unknown language(s): {', '.join(unknown)}")

    return [lang for lang in languages if lang.lookup_code in wanted or (lang.code and lang.code in wanted)]
