"""
BookmarkTree - Test Configuration and Fixtures

Sample bookmark exports shared by the parser, builder and CLI tests.
"""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from bookmark_tree.config import reset_config
from bookmark_tree.models import BookmarkNode, BookmarkRecord


SAMPLE_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3 ADD_DATE="1634454300" LAST_MODIFIED="1634454400" PERSONAL_TOOLBAR_FOLDER="true">Bookmarks bar</H3>
    <DL><p>
        <DT><A HREF="https://example.com/" ADD_DATE="1634454300">Example</A>
        <DT><A HREF="https://www.python.org/">Python</A>
        <DT><H3 ADD_DATE="1634454300">Reading</H3>
        <DL><p>
            <DT><A HREF="https://docs.python.org/3/" ADD_DATE="1634454300" LAST_MODIFIED="1634454360">Docs</A>
        </DL><p>
    </DL><p>
</DL><p>
"""

DUPLICATE_TITLES_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3>Root</H3>
    <DL><p>
        <DT><H3>Work</H3>
        <DL><p>
            <DT><A HREF="https://jira.example.com/">Jira</A>
        </DL><p>
        <DT><H3>Work</H3>
        <DL><p>
            <DT><A HREF="https://wiki.example.com/">Wiki</A>
        </DL><p>
    </DL><p>
</DL><p>
"""

TWO_ROOTS_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3 PERSONAL_TOOLBAR_FOLDER="true">Bookmarks bar</H3>
    <DL><p>
        <DT><H3>Work</H3>
        <DL><p>
            <DT><A HREF="https://jira.example.com/">Jira</A>
        </DL><p>
    </DL><p>
    <DT><H3>Other bookmarks</H3>
    <DL><p>
        <DT><H3>Work</H3>
        <DL><p>
            <DT><A HREF="https://secret.example.com/">Secret</A>
        </DL><p>
    </DL><p>
</DL><p>
"""

NESTED_NAMESAKE_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3>Root</H3>
    <DL><p>
        <DT><H3>Archive</H3>
        <DL><p>
            <DT><H3>Archive</H3>
            <DL><p>
                <DT><A HREF="https://old.example.com/">Old</A>
            </DL><p>
        </DL><p>
    </DL><p>
</DL><p>
"""

NO_FOLDERS_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<H1>Bookmarks</H1>
<DL><p>
    <DT><A HREF="https://example.com/">Example</A>
</DL><p>
"""


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any .env file"""
    for name in ("BOOKMARKS_FILE", "FILE_ENCODING", "JSON_INDENT", "STRICT_TITLES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


def write_export(directory: Path, content: str, name: str = "bookmarks.html") -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_export(tmp_path: Path) -> Path:
    """A well-formed export with one root, two links and one subfolder"""
    return write_export(tmp_path, SAMPLE_EXPORT)


@pytest.fixture
def duplicate_titles_export(tmp_path: Path) -> Path:
    return write_export(tmp_path, DUPLICATE_TITLES_EXPORT)


@pytest.fixture
def two_roots_export(tmp_path: Path) -> Path:
    """Chrome-style export: toolbar and "Other bookmarks" both hold a "Work" folder"""
    return write_export(tmp_path, TWO_ROOTS_EXPORT)


@pytest.fixture
def nested_namesake_export(tmp_path: Path) -> Path:
    return write_export(tmp_path, NESTED_NAMESAKE_EXPORT)


@pytest.fixture
def no_folders_export(tmp_path: Path) -> Path:
    return write_export(tmp_path, NO_FOLDERS_EXPORT)


@pytest.fixture
def sample_soup() -> BeautifulSoup:
    return BeautifulSoup(SAMPLE_EXPORT, "html5lib")


def make_record(index: int, title: str, parent_title: str = "", links: tuple[str, ...] = ()) -> BookmarkRecord:
    """Build a flat record with links named after their titles"""
    return BookmarkRecord(
        index=index,
        title=title,
        parent_title=parent_title,
        links=[BookmarkNode(title=name, url=f"https://example.com/{name}") for name in links],
    )


@pytest.fixture
def record_factory():
    """Factory for flat records, for tests that skip HTML parsing"""
    return make_record
