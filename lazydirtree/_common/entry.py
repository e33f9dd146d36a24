"""Entry descriptors for lazydirtree.

A FileEntry is an immutable record of one file or folder as the backing
store knows it. Entries are plain values: the tree holds them, it never
owns or mutates them.
"""

from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Any, Dict, Optional


class EntryKind(IntEnum):
    """Kind of a stored entry."""
    FILE = 1
    FOLDER = 2


_KIND_LABELS = {
    EntryKind.FILE: "file",
    EntryKind.FOLDER: "folder",
}


@dataclass(frozen=True)
class FileEntry:
    """Descriptor of one file-system entry in a volume.

    Folders always report a size of 0 here. The aggregate size of a folder
    is a property of its loaded Dir, not of its descriptor.

    Attributes:
        id: Entry ID, unique within the volume
        parent_id: ID of the containing folder, None when unknown (roots)
        volume_id: Volume (namespace) the entry belongs to
        name: Display name
        kind: EntryKind.FILE or EntryKind.FOLDER
        version: Store-side version counter
        size: Size in bytes (files only)
        ctime: Creation timestamp
        creator: ID of the creating user
        mtime: Modification timestamp
        modifier: ID of the last modifying user
    """

    id: int
    parent_id: Optional[int]
    volume_id: int
    kind: EntryKind
    name: str = ""
    version: int = 0
    size: int = 0
    ctime: Optional[int] = None
    creator: Optional[int] = None
    mtime: Optional[int] = None
    modifier: Optional[int] = None

    def __post_init__(self):
        # Accept the store's raw integer codes
        object.__setattr__(self, "kind", EntryKind(self.kind))
        if self.size < 0:
            raise ValueError(f"entry {self.id}: size cannot be negative ({self.size})")
        if self.kind == EntryKind.FOLDER and self.size != 0:
            raise ValueError(f"entry {self.id}: folder entries must report size 0, got {self.size}")

    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    def is_folder(self) -> bool:
        return self.kind == EntryKind.FOLDER

    @property
    def kind_label(self) -> str:
        """Display string for the entry kind ("file" or "folder")."""
        return _KIND_LABELS[self.kind]

    def metadata(self) -> Dict[str, Any]:
        """Return the entry fields as a plain dictionary.

        The kind is rendered as its label so the result is ready for
        display or structured logging.
        """
        data = asdict(self)
        data["kind"] = self.kind_label
        return data

    def __str__(self) -> str:
        return (f"id={self.id},parent={self.parent_id},"
                f"name={self.name},type={self.kind_label}")
