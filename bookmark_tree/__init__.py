"""
BookmarkTree - Netscape Bookmarks to JSON

Parses browser bookmark exports (NETSCAPE-Bookmark-file HTML) into a single
tree of folders and links.
"""

__version__ = "1.0.0"

from .errors import (
    AmbiguousRootError,
    BookmarkTreeError,
    DocumentParseError,
    DocumentReadError,
    DuplicateTitleError,
    TreeCycleError,
)
from .models import BookmarkNode, BookmarkRecord
from .netscape_parser import NetscapeParser, extract_records, parse_bookmarks_file
from .tree_builder import TreeBuilder, build_tree

__all__ = [
    "BookmarkNode",
    "BookmarkRecord",
    "NetscapeParser",
    "extract_records",
    "parse_bookmarks_file",
    "TreeBuilder",
    "build_tree",
    "BookmarkTreeError",
    "DocumentReadError",
    "DocumentParseError",
    "TreeCycleError",
    "DuplicateTitleError",
    "AmbiguousRootError",
]
