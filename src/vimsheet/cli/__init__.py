"""
Command-line interface entry points for vim-cheatsheet.

Entry points:
- vsfetch: Scrape cheat sheet pages into per-language JSON
- vsheet: Look up keybindings in the scraped data
"""
