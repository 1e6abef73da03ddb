"""Tests for cheat sheet HTML parsing."""

import pytest

from vimsheet.models import CommandRecord
from vimsheet.parser import MarkupParser, SoupDocument, parse_commands, split_item_text


# =============================================================================
# Split rule
# =============================================================================

SPLIT_CASES = [
    ("dd  delete current line", ("dd", "delete current line")),
    ("dd - delete (cut) a line", ("dd", "- delete (cut) a line")),
    ("  yy   yank a line  ", ("yy", "yank a line")),
    ("Ctrl+w s split window", ("Ctrl+w", "s split window")),
    ("gg\tgo to first line", ("gg", "go to first line")),
    (":wq write and quit", (":wq", "write and quit")),
    # Newline inside the text moves the split to the last line break
    ("first part\nsecond part", ("first part", "second part")),
]


class TestSplitItemText:
    """The shortest leading token run becomes the key sequence."""

    @pytest.mark.parametrize("text,expected", SPLIT_CASES)
    def test_split(self, text, expected):
        assert split_item_text(text) == expected

    @pytest.mark.parametrize("text", ["dd", "", "   ", "  gg  "])
    def test_unsplittable(self, text):
        assert split_item_text(text) is None


# =============================================================================
# Real markup via BeautifulSoup
# =============================================================================

class TestParseHtml:

    def test_sample_page(self, sample_html):
        commands = parse_commands(sample_html)

        assert commands == [
            CommandRecord(":h[elp]", "keyword - open help for keyword", "Global"),
            CommandRecord(":sav[eas]", "file - save file as", "Global"),
            CommandRecord("h", "- move cursor left", "Cursor movement"),
            CommandRecord("j", "- move cursor down", "Cursor movement"),
            CommandRecord("yy", "- yank (copy) a line", "Cut and paste"),
            CommandRecord("dd", "- delete (cut) a line", "Cut and paste"),
        ]

    def test_parse_is_idempotent(self, sample_html):
        assert parse_commands(sample_html) == parse_commands(sample_html)

    def test_heading_order_preserved(self):
        html = """
        <h2>Zeta</h2><ul><li>z one</li><li>z two</li></ul>
        <h2>Alpha</h2><ul><li>a one</li></ul>
        """
        categories = [c.category for c in parse_commands(html)]
        assert categories == ["Zeta", "Zeta", "Alpha"]

    def test_empty_document(self):
        assert parse_commands("") == []

    def test_document_without_headings(self):
        assert parse_commands("<ul><li>dd delete line</li></ul>") == []

    def test_heading_followed_by_non_list(self):
        html = """
        <h2>Nothing here</h2>
        <p>text</p>
        <ul><li>x delete character</li></ul>
        <h2>Editing</h2>
        <ul><li>r replace a single character</li></ul>
        """
        commands = parse_commands(html)
        assert commands == [CommandRecord("r", "replace a single character", "Editing")]

    def test_heading_at_end_of_document(self):
        html = "<h2>Editing</h2><ul><li>u undo</li></ul><h2>Trailing</h2>"
        commands = parse_commands(html)
        assert [c.category for c in commands] == ["Editing"]

    def test_whitespace_between_heading_and_list(self):
        html = "<h2>Editing</h2>\n\n   <ul>\n<li>u undo</li>\n</ul>"
        assert parse_commands(html) == [CommandRecord("u", "undo", "Editing")]

    def test_duplicate_headings_stay_separate(self):
        html = """
        <h2>Tips</h2><ul><li>a one</li></ul>
        <h2>Other</h2><ul><li>b two</li></ul>
        <h2>Tips</h2><ul><li>c three</li></ul>
        """
        commands = parse_commands(html)
        assert [(c.keys, c.category) for c in commands] == [
            ("a", "Tips"), ("b", "Other"), ("c", "Tips"),
        ]

    def test_heading_text_is_stripped(self):
        html = "<h2>\n   Visual commands  \n</h2><ul><li>&gt; shift text right</li></ul>"
        commands = parse_commands(html)
        assert commands == [CommandRecord(">", "shift text right", "Visual commands")]

    def test_nested_items_are_included(self):
        html = """
        <h2>Registers</h2>
        <ul>
          <li>:reg show registers content
            <ul><li>"xy yank into register x</li></ul>
          </li>
        </ul>
        """
        keys = [c.keys for c in parse_commands(html)]
        assert '"xy' in keys

    def test_category_always_from_earlier_heading(self, sample_html):
        headings = [h.get_text().strip() for h in SoupDocument(sample_html).headings()]
        for command in parse_commands(sample_html):
            assert command.category in headings


# =============================================================================
# Synthetic documents through the DocumentQuery interface
# =============================================================================

class FakeDocument:
    """Sections as (heading, items-or-None) pairs; None means no list follows."""

    def __init__(self, sections):
        self.sections = sections

    def headings(self):
        return list(range(len(self.sections)))

    def next_list(self, heading):
        items = self.sections[heading][1]
        return None if items is None else items

    def list_items(self, list_node):
        return list_node

    def text(self, node):
        if isinstance(node, int):
            return self.sections[node][0]
        return node


class TestParseDocument:

    def test_fake_document(self):
        doc = FakeDocument([
            ("Editing", ["r replace character", "J join line"]),
            ("Missing", None),
            ("Exiting", [":q quit", "ZZ"]),
        ])

        commands = MarkupParser().parse_document(doc)

        assert commands == [
            CommandRecord("r", "replace character", "Editing"),
            CommandRecord("J", "join line", "Editing"),
            CommandRecord(":q", "quit", "Exiting"),
        ]

    def test_empty_fake_document(self):
        assert MarkupParser().parse_document(FakeDocument([])) == []

    def test_custom_document_factory(self):
        parser = MarkupParser(document_factory=lambda html: FakeDocument([("From factory", [html])]))
        assert parser.parse("w next word") == [CommandRecord("w", "next word", "From factory")]

    def test_soup_document_custom_tags(self):
        html = "<h3>Marks</h3><ol><li>ma set mark a</li></ol>"
        doc = SoupDocument(html, heading_tag="h3", list_tag="ol")
        assert MarkupParser().parse_document(doc) == [CommandRecord("ma", "set mark a", "Marks")]
