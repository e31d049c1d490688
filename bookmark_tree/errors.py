"""
BookmarkTree - Exceptions

Errors raised while reading, parsing and assembling a bookmarks export.
"""


class BookmarkTreeError(Exception):
    """Base class for all bookmark tree errors"""


class DocumentReadError(BookmarkTreeError):
    """The bookmarks file could not be read"""


class DocumentParseError(BookmarkTreeError):
    """The bookmarks file could not be parsed as HTML"""


class TreeCycleError(BookmarkTreeError):
    """A folder is nested under a folder with its own title"""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Cycle detected in folder titles: {' -> '.join(chain)}")


class DuplicateTitleError(BookmarkTreeError):
    """Raised in strict mode when folder titles are not unique"""

    def __init__(self, titles: list[str]):
        self.titles = titles
        super().__init__(f"Duplicate folder titles: {', '.join(repr(t) for t in titles)}")


class AmbiguousRootError(BookmarkTreeError):
    """Raised in strict mode when more than one folder has no parent"""

    def __init__(self, titles: list[str]):
        self.titles = titles
        super().__init__(f"Multiple root folders: {', '.join(repr(t) for t in titles)}")
