"""Test fixtures for lazydirtree consumers.

FakeVolumeStore stands in for a remote directory store: it keeps entries in
memory, serves one folder level per call like a real retrieval function
would, and records every call so tests can check what a load fetched.
"""

import asyncio
from typing import Dict, List, Optional, Tuple

from .._common.context import CancellationContext
from .._common.entry import EntryKind, FileEntry


class FakeVolumeStore:
    """In-memory backing store keyed by (volume_id, folder_id).

    Example:
        store = FakeVolumeStore()
        store.add_root(volume_id=1, root_id=0)
        store.insert(1, parent_id=0, entry_id=10, size=5, kind=EntryKind.FILE)

        root = Dir.virtual(volume_id=1)
        dfs_load(root, retrieve=store.retrieve)
        assert store.calls == [(1, 0)]
    """

    def __init__(self):
        self._children: Dict[Tuple[int, int], List[FileEntry]] = {}
        self._failures: Dict[Tuple[int, int], Exception] = {}
        self.calls: List[Tuple[int, int]] = []

    def add_root(self, volume_id: int, root_id: int = 0) -> None:
        """Register a folder with no parent, such as the root of a volume."""
        self._children.setdefault((volume_id, root_id), [])

    def insert(self, volume_id: int, parent_id: int, entry_id: int,
               size: int = 0, kind: EntryKind = EntryKind.FILE,
               name: Optional[str] = None) -> FileEntry:
        """Add an entry under an existing folder.

        Folder sizes are forced to 0. Names default to "<parent>-<id>".

        Raises:
            KeyError: If parent_id is not a known folder of the volume
        """
        kind = EntryKind(kind)
        if (volume_id, parent_id) not in self._children:
            raise KeyError(f"parent={parent_id} does not exist in volume {volume_id}")

        entry = FileEntry(
            id=entry_id,
            parent_id=parent_id,
            volume_id=volume_id,
            kind=kind,
            name=name if name is not None else f"{parent_id}-{entry_id}",
            version=1,
            size=0 if kind == EntryKind.FOLDER else size,
        )
        self._children[(volume_id, parent_id)].append(entry)
        if kind == EntryKind.FOLDER:
            self._children.setdefault((volume_id, entry_id), [])
        return entry

    def fail_on(self, volume_id: int, folder_id: int, error: Exception) -> None:
        """Make retrieval of one folder raise error."""
        self._failures[(volume_id, folder_id)] = error

    def list_children(self, volume_id: int, folder_id: int) -> Tuple[List[FileEntry], List[FileEntry]]:
        """Return (files, folders) under a folder without recording a call.

        Unknown folders have no children.
        """
        children = self._children.get((volume_id, folder_id), [])
        files = [entry for entry in children if entry.is_file()]
        folders = [entry for entry in children if entry.is_folder()]
        return files, folders

    def retrieve(self, ctx: CancellationContext, volume_id: int,
                 folder_id: int) -> Tuple[List[FileEntry], List[FileEntry]]:
        """Retrieval function for the sync loader."""
        self.calls.append((volume_id, folder_id))
        error = self._failures.get((volume_id, folder_id))
        if error is not None:
            raise error
        return self.list_children(volume_id, folder_id)

    async def retrieve_async(self, ctx: CancellationContext, volume_id: int,
                             folder_id: int) -> Tuple[List[FileEntry], List[FileEntry]]:
        """Retrieval function for the async loader."""
        # Simulate async I/O
        await asyncio.sleep(0)
        return self.retrieve(ctx, volume_id, folder_id)


def build_sample_store(volume_id: int = 1) -> FakeVolumeStore:
    """Build the reference tree: 19 entries, 10 bytes, under virtual root 0.

    Structure (files are 1 byte each):
        0
        |---10
        |---11
        |---12(dir)
        |     |---20
        |     |---21
        |     |---22(dir)
        |     |     |---30
        |     |     |---31
        |     |     |---32
        |     |     |---33(dir)
        |     |           |---41
        |     |---23(dir)
        |           |---34
        |           |---35(dir)
        |           |---36(dir)
        |---13(dir)
              |---24(dir)
                    |---37(dir)
                          |---42
    """
    store = FakeVolumeStore()
    store.add_root(volume_id, 0)

    FILE, FOLDER = EntryKind.FILE, EntryKind.FOLDER
    layout = [
        # First level
        (0, 10, 1, FILE),
        (0, 11, 1, FILE),
        (0, 12, 0, FOLDER),
        (0, 13, 0, FOLDER),
        # Second level
        (12, 20, 1, FILE),
        (12, 21, 1, FILE),
        (12, 22, 0, FOLDER),
        (12, 23, 0, FOLDER),
        (13, 24, 0, FOLDER),
        # Third level
        (22, 30, 1, FILE),
        (22, 31, 1, FILE),
        (22, 32, 1, FILE),
        (22, 33, 0, FOLDER),
        (23, 34, 1, FILE),
        (23, 35, 0, FOLDER),
        (23, 36, 0, FOLDER),
        (24, 37, 0, FOLDER),
        # Fourth level
        (33, 41, 1, FILE),
        (37, 42, 1, FILE),
    ]
    for parent_id, entry_id, size, kind in layout:
        store.insert(volume_id, parent_id, entry_id, size, kind)
    return store
