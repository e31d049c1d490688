"""
BookmarkTree - Netscape Bookmarks Parser

Parses NETSCAPE-Bookmark-file HTML exports into a flat list of folder records.

The format encodes hierarchy through element position only:

    <DT><H3 ADD_DATE="..." LAST_MODIFIED="...">Folder</H3>
    <DL><p>
        <DT><A HREF="..." ADD_DATE="...">Link</A>
        <DT><H3>Subfolder</H3>
        <DL><p>
            ...
        </DL><p>
    </DL><p>

A folder's contents are the <DT> items of the <DL> right after its <H3>, and
its parent is the <H3> right before the <DL> that holds its own <DT>.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound, Tag

from .errors import DocumentParseError, DocumentReadError
from .models import BookmarkNode, BookmarkRecord
from .timestamps import parse_epoch
from .tree_builder import TreeBuilder, build_tree

logger = logging.getLogger(__name__)

# Netscape exports never close <DT> or <p>; only an HTML5 tree builder
# nests them the way browsers do.
HTML_PARSER = "html5lib"


def _next_element(tag: Tag) -> Optional[Tag]:
    """Return the next sibling that is an element, skipping text nodes"""
    for sibling in tag.next_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def _previous_element(tag: Tag) -> Optional[Tag]:
    for sibling in tag.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def _first_child_element(tag: Tag) -> Optional[Tag]:
    for child in tag.children:
        if isinstance(child, Tag):
            return child
    return None


def _link_from_anchor(anchor: Tag) -> BookmarkNode:
    return BookmarkNode(
        title=anchor.get_text().strip(),
        url=anchor.get("href", ""),
        add_at=parse_epoch(anchor.get("add_date")),
        update_at=parse_epoch(anchor.get("last_modified")),
    )


def _folder_links(header: Tag) -> list[BookmarkNode]:
    """Collect the links listed directly inside a folder"""
    container = _next_element(header)
    if container is None or container.name != "dl":
        return []

    links = []
    for item in container.find_all("dt", recursive=False):
        anchor = _first_child_element(item)
        if anchor is not None and anchor.name == "a":
            links.append(_link_from_anchor(anchor))
    return links


def _parent_title(header: Tag) -> str:
    """
    Find the title of the folder enclosing this heading.

    Walks <H3> -> <DT> -> <DL> and checks whether the element before that
    <DL> is a folder heading. Returns an empty string for a root candidate.
    """
    item = header.parent
    container = item.parent if item is not None else None
    if container is None or container.name != "dl":
        return ""

    previous = _previous_element(container)
    if previous is not None and previous.name == "h3":
        return previous.get_text().strip()
    return ""


def extract_records(soup: BeautifulSoup) -> list[BookmarkRecord]:
    """
    Extract one record per folder heading, in document order.

    Links are attached to the record of the folder that lists them directly;
    nested folders are separate records linked by parent_title.

    Args:
        soup: A parsed bookmarks document

    Returns:
        List of BookmarkRecord objects
    """
    records = []
    for index, header in enumerate(soup.find_all("h3")):
        records.append(
            BookmarkRecord(
                index=index,
                title=header.get_text().strip(),
                parent_title=_parent_title(header),
                links=_folder_links(header),
                added_at=parse_epoch(header.get("add_date")),
                modified_at=parse_epoch(header.get("last_modified")),
            )
        )

    logger.debug(f"Extracted {len(records)} folder records")
    return records


class NetscapeParser:
    """
    Parser for Netscape-format bookmarks HTML export files.

    Example:
        parser = NetscapeParser("bookmarks.html")
        records = parser.parse()
    """

    def __init__(
        self,
        file_path: str | Path,
        encoding: str = "utf-8",
    ):
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"Bookmarks file not found: {self.file_path}")
        self.encoding = encoding

    def load(self) -> BeautifulSoup:
        """
        Read and parse the bookmarks file.

        Raises:
            DocumentReadError: If the file cannot be read
            DocumentParseError: If the content cannot be decoded or parsed
        """
        try:
            html_content = self.file_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"Cannot decode {self.file_path} as {self.encoding}: {e}") from e
        except OSError as e:
            raise DocumentReadError(f"Cannot read {self.file_path}: {e}") from e

        try:
            return BeautifulSoup(html_content, HTML_PARSER)
        except FeatureNotFound as e:
            raise DocumentParseError(
                f"HTML parser {HTML_PARSER!r} is not installed"
            ) from e
        except Exception as e:
            raise DocumentParseError(f"Cannot parse {self.file_path}: {e}") from e

    def parse(self) -> list[BookmarkRecord]:
        """
        Parse the bookmarks file into flat folder records.

        Returns:
            List of BookmarkRecord objects in document order
        """
        return extract_records(self.load())

    def get_stats(self) -> dict:
        """
        Get statistics about the bookmarks file and the tree built from it.

        Returns:
            Dictionary with folder and link counts in the file and in the
            tree, root candidates, duplicate folder titles with their counts,
            and the folders merged into a namesake or dropped as unreachable

        Raises:
            BookmarkTreeError: If the tree cannot be built
        """
        records = self.parse()
        title_counts = Counter(record.title for record in records)

        builder = TreeBuilder(records)
        tree = builder.build()
        tree_folders, tree_links = tree.count() if builder.root is not None else (0, 0)

        return {
            "file_path": str(self.file_path),
            "total_folders": len(records),
            "total_links": sum(len(record.links) for record in records),
            "root_found": builder.root is not None,
            "root_candidates": [r.title for r in records if r.is_root_candidate],
            "duplicate_titles": {t: n for t, n in sorted(title_counts.items()) if n > 1},
            "tree_folders": tree_folders,
            "tree_links": tree_links,
            "merged": len(builder.merged),
            "unreachable": [
                {"title": r.title, "parent_title": r.parent_title} for r in builder.unreachable
            ],
        }


def parse_bookmarks_file(
    file_path: str | Path,
    strict: bool = False,
) -> BookmarkNode:
    """
    Convenience function to turn a bookmarks file into a tree.

    Args:
        file_path: Path to the bookmarks HTML file
        strict: Fail on duplicate folder titles instead of merging them

    Returns:
        The root BookmarkNode, empty if no root folder was found
    """
    parser = NetscapeParser(file_path)
    return build_tree(parser.parse(), strict=strict)
