#!/usr/bin/env python3
"""
vsheet — Look up Vim keybindings from the scraped cheat sheet

Reads the per-language JSON files written by vsfetch and prints the commands
grouped by category, optionally filtered by a search term.

Usage:
    vsheet                      # Whole cheat sheet in the current language
    vsheet delete               # Commands mentioning "delete"
    vsheet --lang ko yank       # Search the Korean sheet
    vsheet --languages          # Show which languages have data

The current language comes from --lang, then VIMSHEET_LANG, then "en".
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from vimsheet.cheatsheet import display_name, group_by_category, load_datasets, search
from vimsheet.errors import ConfigError
from vimsheet.languages import Language, load_config
from vimsheet.models import CommandRecord

DEFAULT_LANGUAGE = "en"


def current_language(requested: str | None) -> str:
    return requested or os.environ.get("VIMSHEET_LANG") or DEFAULT_LANGUAGE


def make_category_table(category: str, commands: list[CommandRecord]) -> Table:
    """A two-column table (keys, description) for one category."""
    table = Table(
        title=Text(f"{category} ({len(commands)} commands)", style="bold"),
        title_justify="left",
        box=box.SIMPLE,
        show_header=False,
    )
    table.add_column("Keys", style="bright_cyan", no_wrap=True)
    table.add_column("Description")

    # Text() keeps brackets in keys like "[[" from being read as markup
    for command in commands:
        table.add_row(Text(command.keys), Text(command.description))

    return table


def render_cheatsheet(
    console: Console,
    commands: list[CommandRecord],
    *,
    total: int,
    language_name: str,
    query: str = "",
) -> None:
    """Print matching commands grouped by category."""
    matched = search(commands, query)

    if not matched:
        console.print(Text(f"No commands match {query!r}", style="yellow"))
        return

    for category, group in group_by_category(matched).items():
        console.print(make_category_table(category, group))

    if query:
        summary = f"{len(matched)} of {total} commands match {query!r}"
    else:
        summary = f"{total} commands"
    console.print(Text(f"{summary} • Current: {language_name}", style="dim"))


def render_languages(
    console: Console,
    available: list[str],
    languages: list[Language],
    current: str,
) -> None:
    """Print languages that have data, marking the current one."""
    table = Table(box=box.SIMPLE)
    table.add_column("Code", style="bright_cyan")
    table.add_column("Language")
    table.add_column("")

    for code in available:
        marker = "(Current)" if code == current else ""
        table.add_row(Text(code), Text(display_name(code, languages)), Text(marker))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up Vim keybindings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("query", nargs="*", help="Search keys, descriptions and categories")
    parser.add_argument("--lang", "-L", help="Language code (default: $VIMSHEET_LANG or en)")
    parser.add_argument("--data-dir", "-d", type=Path, help="Directory holding <lang>.json files")
    parser.add_argument("--config", "-c", type=Path, help="Language configuration YAML")
    parser.add_argument(
        "--languages", action="store_true", help="List languages with available data"
    )
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print(Text(f"Error: {e}", style="red"))
        return 1

    data_dir = args.data_dir or config.settings.output_dir
    datasets = load_datasets(data_dir, config.languages)
    language = current_language(args.lang)

    if args.languages:
        render_languages(console, list(datasets), config.languages, language)
        return 0

    dataset = datasets.get(language)
    if dataset is None:
        console.print(Text(f"No data available for language: {language}", style="red"))
        return 1

    render_cheatsheet(
        console,
        dataset.commands,
        total=len(dataset.commands),
        language_name=display_name(language, config.languages),
        query=" ".join(args.query),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
