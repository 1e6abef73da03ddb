#!/usr/bin/env python3
"""
vsfetch — Scrape the Vim cheat sheet into per-language JSON files

Fetches every language listed in schema/languages.yaml, one at a time with a
short pause in between, and writes data/<lang>.json for each.

Usage:
    vsfetch                     # Scrape all configured languages
    vsfetch ko ja               # Scrape specific languages
    vsfetch --list              # List configured languages
    vsfetch --output-dir out    # Write somewhere else
    vsfetch --delay 2           # Wait longer between languages

Exit status is 0 only if every selected language was written.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from vimsheet.errors import ConfigError
from vimsheet.fetcher import LanguageFetcher
from vimsheet.languages import Language, load_config, select_languages
from vimsheet.orchestrator import BatchOrchestrator, LanguageOutcome
from vimsheet.writer import DatasetWriter

logger = logging.getLogger("vimsheet")

# ==============================================================================
# Terminal output
# ==============================================================================

CI_MODE = os.environ.get("CI") == "true" or os.environ.get("VIMSHEET_CI") == "1"

USE_COLOR = sys.stdout.isatty() and not CI_MODE


def color(code: str, text: str) -> str:
    """Apply ANSI color code if colors are enabled."""
    if USE_COLOR:
        return f"\033[{code}m{text}\033[0m"
    return text


RED = lambda t: color("0;31", t)
GREEN = lambda t: color("0;32", t)
YELLOW = lambda t: color("1;33", t)
BOLD = lambda t: color("1", t)
DIM = lambda t: color("2", t)


def print_outcome(index: int, total: int, outcome: LanguageOutcome) -> None:
    """Print one status line for a finished language."""
    lang = outcome.language
    print(f"[{index}/{total}] {BOLD(lang.name)} {DIM(lang.filename)}")
    if outcome.ok:
        print(f"      -> {GREEN('OK')} {outcome.command_count:,} commands | {outcome.path}")
    else:
        print(f"      -> {RED('ERROR')} {outcome.error}")


def list_languages(languages: list[Language], output_dir: Path) -> None:
    """Print configured languages and whether their data file exists."""
    print(f"\n{BOLD('Configured languages:')}\n")
    for lang in languages:
        exists = (output_dir / lang.filename).exists()
        marker = GREEN("present") if exists else DIM("missing")
        url_code = lang.code or "(default)"
        print(f"    {GREEN(lang.lookup_code):12} {lang.name:24} {url_code:12} {marker}")
    print()


# ==============================================================================
# Main
# ==============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape the Vim cheat sheet into per-language JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "languages",
        nargs="*",
        help="Languages to scrape by lookup code or URL code (default: all)",
    )
    parser.add_argument(
        "--config", "-c", type=Path, help="Language configuration YAML"
    )
    parser.add_argument(
        "--output-dir", "-o", type=Path, help="Directory for <lang>.json files"
    )
    parser.add_argument(
        "--delay", type=float, help="Seconds to wait between languages"
    )
    parser.add_argument(
        "--timeout", type=float, help="Per-request timeout in seconds"
    )
    parser.add_argument(
        "--list", "-l", action="store_true", help="List configured languages"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_config(args.config)
        languages = select_languages(config.languages, args.languages)
    except ConfigError as e:
        print(f"{RED('Error')}: {e}")
        return 1

    settings = config.settings
    output_dir = args.output_dir or settings.output_dir
    delay = args.delay if args.delay is not None else settings.delay_seconds
    timeout = args.timeout if args.timeout is not None else settings.timeout_seconds

    if args.list:
        list_languages(languages, output_dir)
        return 0

    print(f"\n{BOLD(f'Scraping {len(languages)} languages...')}")

    fetcher = LanguageFetcher(settings.base_url, timeout=timeout)
    orchestrator = BatchOrchestrator(
        languages,
        fetcher,
        DatasetWriter(output_dir),
        delay=delay,
        on_outcome=print_outcome,
    )

    try:
        report = orchestrator.run_all()
    except KeyboardInterrupt:
        print(f"\n\n{YELLOW('Interrupted.')} Files already written are intact.")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.exception("Scraping failed")
        print(f"{RED('Scraping failed')}: {e}")
        return 1
    finally:
        fetcher.close()

    succeeded = len(report.succeeded)
    failed = len(report.failed)

    summary_parts = [GREEN(f"{succeeded} saved")]
    if failed:
        summary_parts.append(RED(f"{failed} failed"))

    status_icon = GREEN("OK") if report.ok else RED("ERROR")
    print(f"\n{status_icon} Complete: {', '.join(summary_parts)}")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
