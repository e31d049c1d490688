"""
BookmarkTree - Tree Builder

Assembles the flat folder records produced by the parser into a single
rooted tree.

Folders are linked to their parent by title, and only folders reached from
the root by that linkage end up in the tree. A title is expanded once: when
the walk reaches a second folder with an already placed title, its links are
appended to the existing node and its subfolders are already beneath it.
"""

import logging
from collections import Counter, defaultdict
from typing import Iterable, Optional

from .errors import AmbiguousRootError, DuplicateTitleError, TreeCycleError
from .models import BookmarkNode, BookmarkRecord

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Builds a BookmarkNode tree from BookmarkRecord objects.

    After build(), `root` is the record chosen as root (None if there was
    none), `unreachable` holds the records that could not be placed
    under the root and `merged` the duplicate-title records folded into an
    earlier folder.
    """

    def __init__(self, records: Iterable[BookmarkRecord], strict: bool = False):
        self.records = list(records)
        self.strict = strict
        self.root: Optional[BookmarkRecord] = None
        self.unreachable: list[BookmarkRecord] = []
        self.merged: list[BookmarkRecord] = []
        self._placed: dict[str, BookmarkNode] = {}
        self._by_parent: dict[str, list[BookmarkRecord]] = defaultdict(list)
        self._consumed: set[int] = set()

    def find_root(self) -> Optional[BookmarkRecord]:
        """
        Return the first record without a parent folder.

        Raises:
            AmbiguousRootError: In strict mode, if there is more than one
        """
        candidates = [record for record in self.records if record.is_root_candidate]
        if not candidates:
            return None

        if len(candidates) > 1:
            titles = [record.title for record in candidates]
            if self.strict:
                raise AmbiguousRootError(titles)
            logger.warning(
                f"Found {len(candidates)} root folders {titles}, using {titles[0]!r}"
            )
        return candidates[0]

    def check_duplicates(self) -> None:
        """
        Raises:
            DuplicateTitleError: If two folders share a title
        """
        counts = Counter(record.title for record in self.records)
        duplicates = sorted(title for title, n in counts.items() if n > 1)
        if duplicates:
            raise DuplicateTitleError(duplicates)

    def build(self) -> BookmarkNode:
        """
        Build the tree.

        Returns:
            The root node, or an empty node if no root folder exists

        Raises:
            TreeCycleError: If a folder sits beneath a folder with its own title
            DuplicateTitleError: In strict mode, on duplicate folder titles
            AmbiguousRootError: In strict mode, on more than one root folder
        """
        self.root = None
        self.unreachable = []
        self.merged = []
        self._consumed = set()

        if self.strict:
            self.check_duplicates()

        root_record = self.root = self.find_root()
        if root_record is None:
            logger.error("Root folder not found")
            return BookmarkNode()

        self._placed = {}
        self._by_parent = defaultdict(list)
        for record in self.records:
            if record.index != root_record.index:
                self._by_parent[record.parent_title].append(record)

        root = self._place(root_record)
        self._attach(root, [root.title])

        self.unreachable = [r for r in self.records if r.index not in self._consumed]
        if self.unreachable:
            logger.warning(
                f"Dropped {len(self.unreachable)} folders unreachable from "
                f"{root.title!r}: {[r.title for r in self.unreachable]}"
            )

        return root

    def _place(self, record: BookmarkRecord) -> BookmarkNode:
        node = record.to_node()
        self._consumed.add(record.index)
        self._placed[record.title] = node
        return node

    def _merge(self, record: BookmarkRecord) -> None:
        """Fold a reached duplicate into the node already placed for its title"""
        logger.debug(f"Merging duplicate folder {record.title!r} (#{record.index})")
        existing = self._placed[record.title]
        existing.bookmarks.extend(link.model_copy() for link in record.links)
        self._consumed.add(record.index)
        self.merged.append(record)

    def _attach(self, node: BookmarkNode, path: list[str]) -> None:
        for record in self._by_parent[node.title]:
            if record.title in path:
                raise TreeCycleError(path + [record.title])
            if record.index in self._consumed:
                continue

            if record.title in self._placed:
                self._merge(record)
                continue

            child = self._place(record)
            node.bookmarks.append(child)
            self._attach(child, path + [child.title])


def build_tree(records: Iterable[BookmarkRecord], strict: bool = False) -> BookmarkNode:
    """
    Build a bookmark tree from flat folder records.

    Args:
        records: Records in document order, as returned by the parser
        strict: Fail on duplicate folder titles or multiple roots

    Returns:
        The root BookmarkNode, empty if no root folder was found
    """
    return TreeBuilder(records, strict=strict).build()
