"""
Cheat sheet HTML parser.

The source page is a sequence of sections, each an <h2> heading followed
directly by a <ul> whose items read "<keys> <description>":

    <h2>Cursor movement</h2>
    <ul>
      <li><kbd>h</kbd> - move cursor left</li>
      ...
    </ul>

Parsing goes through the small DocumentQuery interface so the extraction
rules can be exercised against synthetic documents. SoupDocument is the
BeautifulSoup-backed implementation used for real pages.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Protocol

from bs4 import BeautifulSoup, Tag

from vimsheet.models import CommandRecord

logger = logging.getLogger(__name__)

# Shortest leading run of tokens is the key sequence, the rest is the description.
ITEM_SPLIT_RE = re.compile(r"(\S+(?:\s+\S+)*?)\s+(.+)")

HEADING_TAG = "h2"
LIST_TAG = "ul"
ITEM_TAG = "li"


class DocumentQuery(Protocol):
    """The handful of DOM queries the parser needs."""

    def headings(self) -> Iterable[Any]:
        """Category headings in document order."""
        ...

    def next_list(self, heading: Any) -> Any | None:
        """The list element directly following a heading, or None."""
        ...

    def list_items(self, list_node: Any) -> Iterable[Any]:
        """Items of a list in document order."""
        ...

    def text(self, node: Any) -> str:
        """Concatenated text content of a node."""
        ...


class SoupDocument:
    """DocumentQuery over a BeautifulSoup tree."""

    def __init__(
        self,
        html: str,
        *,
        heading_tag: str = HEADING_TAG,
        list_tag: str = LIST_TAG,
        item_tag: str = ITEM_TAG,
    ):
        self.soup = BeautifulSoup(html or "", "html.parser")
        self.heading_tag = heading_tag
        self.list_tag = list_tag
        self.item_tag = item_tag

    def headings(self) -> list[Tag]:
        return self.soup.find_all(self.heading_tag)

    def next_list(self, heading: Tag) -> Tag | None:
        # Only the adjacent element counts, not any later list
        for sibling in heading.next_siblings:
            if isinstance(sibling, Tag):
                return sibling if sibling.name == self.list_tag else None
        return None

    def list_items(self, list_node: Tag) -> list[Tag]:
        return list_node.find_all(self.item_tag)

    def text(self, node: Tag) -> str:
        return node.get_text()


def split_item_text(text: str) -> tuple[str, str] | None:
    """
    Split a list item into (keys, description).

    Returns None when the text has no interior whitespace separating two
    non-empty parts.

    >>> split_item_text("dd  delete current line")
    ('dd', 'delete current line')
    >>> split_item_text("dd") is None
    True
    """
    match = ITEM_SPLIT_RE.fullmatch(text.strip())
    if not match:
        return None
    return match.group(1).strip(), match.group(2).strip()


class MarkupParser:
    """Extracts CommandRecords from cheat sheet markup."""

    def __init__(self, document_factory=SoupDocument):
        self.document_factory = document_factory

    def parse(self, html: str) -> list[CommandRecord]:
        """Parse raw HTML text into records in document order."""
        return self.parse_document(self.document_factory(html))

    def parse_document(self, document: DocumentQuery) -> list[CommandRecord]:
        """Parse an already-built document."""
        commands: list[CommandRecord] = []
        skipped_headings = 0
        skipped_items = 0

        for heading in document.headings():
            category = document.text(heading).strip()

            command_list = document.next_list(heading)
            if command_list is None:
                skipped_headings += 1
                logger.debug(f"No command list after heading: {category!r}")
                continue

            for item in document.list_items(command_list):
                parts = split_item_text(document.text(item))
                if parts is None:
                    skipped_items += 1
                    continue

                keys, description = parts
                commands.append(CommandRecord(keys=keys, description=description, category=category))

        if skipped_headings or skipped_items:
            logger.debug(
                f"Skipped {skipped_headings} heading(s) without a list "
                f"and {skipped_items} unsplittable item(s)"
            )

        return commands


def parse_commands(html: str) -> list[CommandRecord]:
    """Parse cheat sheet HTML with the default BeautifulSoup backend."""
    return MarkupParser().parse(html)
