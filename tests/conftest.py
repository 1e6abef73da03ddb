"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path

import requests

from vimsheet.languages import Language


BASE_URL = "https://vim.example.test"


class FakeSession:
    """Stand-in for requests.Session serving canned pages.

    pages maps URL -> (status, body) or an exception instance to raise.
    Unknown URLs get a 404.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.requested = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.requested.append(url)
        page = self.pages.get(url, (404, "Not Found"))
        if isinstance(page, Exception):
            raise page

        status, body = page
        response = requests.Response()
        response.status_code = status
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.url = url
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def make_session():
    """Factory for FakeSession instances."""
    return FakeSession


@pytest.fixture
def sample_html():
    """A trimmed-down cheat sheet page in the source site's layout."""
    return """<!DOCTYPE html>
<html>
<head><title>Vim Cheat Sheet</title></head>
<body>
<h1>Vim Cheat Sheet</h1>
<div class="content">
  <h2>Global</h2>
  <ul>
    <li><kbd>:h[elp] keyword</kbd> - open help for keyword</li>
    <li><kbd>:sav[eas] file</kbd> - save file as</li>
  </ul>

  <h2>Cursor movement</h2>
  <ul>
    <li><kbd>h</kbd> - move cursor left</li>
    <li><kbd>j</kbd> - move cursor down</li>
    <li>Tip</li>
  </ul>
  <div class="well">Prefix a cursor movement command with a number to repeat it.</div>

  <h2>Search and replace</h2>
  <p>No list directly after this heading.</p>
  <ul>
    <li><kbd>/pattern</kbd> - search for pattern</li>
  </ul>

  <h2>Cut and paste</h2>
  <ul>
    <li><kbd>yy</kbd> - yank (copy) a line</li>
    <li><kbd>dd</kbd> - delete (cut) a line</li>
  </ul>
</div>
</body>
</html>
"""


@pytest.fixture
def sample_languages():
    """Three languages, mirroring the shape of schema/languages.yaml."""
    return [
        Language(code="", name="English", filename="en.json"),
        Language(code="ko", name="한국어", filename="ko.json"),
        Language(code="de_de", name="Deutsch", filename="de.json"),
    ]
