"""
BookmarkTree - Data Models

BookmarkRecord is the flat, build-time representation of a folder found in
the export. BookmarkNode is the assembled tree that gets serialized.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class BookmarkNode(BaseModel):
    """A folder or link in the assembled bookmark tree"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", description="Display text of the folder or link")
    url: Optional[str] = Field(None, description="Link target, None for folders")
    bookmarks: list["BookmarkNode"] = Field(default_factory=list, description="Ordered children")
    add_at: Optional[datetime] = Field(None, alias="addAt", description="When the entry was added")
    update_at: Optional[datetime] = Field(None, alias="updateAt", description="When the entry was last modified")

    @model_serializer(mode="wrap")
    def _omit_empty_bookmarks(self, handler):
        data = handler(self)
        if isinstance(data, dict) and not data.get("bookmarks"):
            data.pop("bookmarks", None)
        return data

    @property
    def is_folder(self) -> bool:
        return self.url is None

    @property
    def is_empty(self) -> bool:
        """True for the placeholder returned when no root folder exists"""
        return not self.title and self.url is None and not self.bookmarks

    def iter_nodes(self) -> Iterator["BookmarkNode"]:
        """Depth-first iteration over this node and all its descendants"""
        yield self
        for child in self.bookmarks:
            yield from child.iter_nodes()

    def count(self) -> tuple[int, int]:
        """Return (folders, links) in this subtree, including this node"""
        folders = links = 0
        for node in self.iter_nodes():
            if node.is_folder:
                folders += 1
            else:
                links += 1
        return folders, links

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary using the output field names"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


BookmarkNode.model_rebuild()


@dataclass
class BookmarkRecord:
    """A folder as found in the export, before tree assembly.

    parent_title is the text of the enclosing folder heading, or an empty
    string when the folder has none (a root candidate). It only exists here
    and never reaches BookmarkNode.
    """
    index: int
    title: str
    parent_title: str = ""
    links: list[BookmarkNode] = field(default_factory=list)
    added_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @property
    def is_root_candidate(self) -> bool:
        return self.parent_title == ""

    def to_node(self) -> BookmarkNode:
        return BookmarkNode(
            title=self.title,
            bookmarks=[link.model_copy() for link in self.links],
            add_at=self.added_at,
            update_at=self.modified_at,
        )
