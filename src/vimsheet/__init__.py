"""
vim-cheatsheet: Vim keybinding quick reference.

Modules:
- parser: HTML cheat sheet to command records
- fetcher: per-language page retrieval
- writer: stable JSON datasets, one file per language
- orchestrator: sequential batch scrape of all configured languages
- cheatsheet: read-only loading, grouping and search for lookups
"""

__version__ = "0.1.0"
