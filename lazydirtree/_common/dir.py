"""Dir, the lazily populated tree node of lazydirtree.

The tree is built from folders only: every Dir wraps one folder entry and
owns one child Dir per sub-folder. Plain files hang off their parent Dir as
FileEntry values and are never traversal targets. Given a store like:

    0 (virtual)
    |-- 10
    |-- 12/
    |     |-- 20
    |     `-- 22/
    `-- 13/

the walks visit the Dirs 0, 12, 22 and 13; files 10 and 20 are reported as
children of 0 and 12.

Nothing in this module performs I/O. Loading levels from the backing store
is the job of the loaders in lazydirtree.sync and lazydirtree.aio.
"""

from typing import Callable, Dict, List, Optional, Sequence

from .context import CancellationContext, ensure_context
from .entry import EntryKind, FileEntry
from .errors import DirAlreadyLoadedError, DirNotLoadedError, NotFolderError
from .progress import LoadResult


# Visit callback: receives the context and the Dir, raises to abort the walk
DirFunc = Callable[[CancellationContext, "Dir"], None]


class Dir:
    """A folder in the tree, populated one level at a time.

    A Dir starts unloaded, with no children and unknown (None) count and
    size. It becomes loaded exactly once, through fill(). There is no
    reload path.

    Args:
        entry: The folder's own descriptor
        depth: Distance from the traversal root (root = 0)
        count: Number of direct children, None until loaded
        size: Total bytes of direct child files, None until loaded

    Raises:
        NotFolderError: If entry is not a folder
    """

    def __init__(self, entry: FileEntry, depth: int = 0,
                 count: Optional[int] = None, size: Optional[int] = None):
        if not entry.is_folder():
            raise NotFolderError(f"entry {entry.id} is a {entry.kind_label}, not a folder")
        self._entry = entry
        self._sub_dirs: List["Dir"] = []
        self._sub_files: List[FileEntry] = []
        self._depth = depth
        self._count = count
        self._size = size
        self._loaded = False

    @classmethod
    def virtual(cls, volume_id: int, virtual_id: int = 0,
                kind: EntryKind = EntryKind.FOLDER) -> "Dir":
        """Create a Dir for a container that does not exist in the store.

        Typical use is the root of a volume. A virtual Dir is left out of
        folder enumerations and does not count itself in totals, but its
        children are handled normally. Only use it as the top-level root.

        Args:
            volume_id: Volume the synthetic folder belongs to
            virtual_id: Entry ID to use, must be <= 0
            kind: Entry kind of the synthetic descriptor

        Returns:
            Unloaded Dir at depth 0

        Raises:
            ValueError: If virtual_id is positive
            NotFolderError: If kind is not a folder kind
        """
        if virtual_id > 0:
            raise ValueError(f"virtual id must be <= 0, got {virtual_id}")
        entry = FileEntry(id=virtual_id, parent_id=None, volume_id=volume_id, kind=kind)
        return cls(entry, 0, None, None)

    # Accessors

    @property
    def entry(self) -> FileEntry:
        return self._entry

    @property
    def id(self) -> int:
        return self._entry.id

    @property
    def volume_id(self) -> int:
        return self._entry.volume_id

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def is_virtual(self) -> bool:
        return self._entry.id <= 0

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def count(self) -> Optional[int]:
        return self._count

    @property
    def size(self) -> Optional[int]:
        return self._size

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def sub_dirs(self) -> List["Dir"]:
        """Child folders as Dirs, in discovery order."""
        return list(self._sub_dirs)

    @property
    def sub_files(self) -> List[FileEntry]:
        """Child files (no folders), in discovery order."""
        return list(self._sub_files)

    @property
    def sub_folders(self) -> List[FileEntry]:
        """Descriptors of the child folders, in discovery order."""
        return [sub_dir.entry for sub_dir in self._sub_dirs]

    @property
    def sub_folders_and_files(self) -> List[FileEntry]:
        """Child folder descriptors followed by child files."""
        return self.sub_folders + self._sub_files

    # Population

    def fill(self, files: Sequence[FileEntry], folders: Sequence[FileEntry]) -> None:
        """Populate this level directly, without recursing.

        Child folders become unloaded Dirs one level deeper. Callers that
        already hold a level's data can fill it by hand and leave deeper
        levels to a bounded load.

        Args:
            files: Direct child files
            folders: Direct child folders

        Raises:
            DirAlreadyLoadedError: If this Dir is already loaded
            NotFolderError: If an entry in folders is not a folder
        """
        if self._loaded:
            raise DirAlreadyLoadedError(f"dir {self.id} already loaded")

        sub_files = list(files)
        sub_dirs = [Dir(folder, self._depth + 1, None, None) for folder in folders]

        self._sub_files = sub_files
        self._sub_dirs = sub_dirs
        self._count = len(sub_files) + len(sub_dirs)
        self._size = sum(file.size for file in sub_files)
        self._loaded = True

    # Traversal primitives (loaded structure only)

    def dfs_walk(self, pre_visit: Optional[DirFunc] = None,
                 post_visit: Optional[DirFunc] = None,
                 ctx: Optional[CancellationContext] = None) -> None:
        """Depth-first walk over loaded Dirs.

        Calls pre_visit on a Dir, walks its sub-folders in order, then calls
        post_visit. The first exception aborts the walk and is re-raised.

        Raises:
            DirNotLoadedError: On reaching any Dir that is not loaded
        """
        self._dfs(pre_visit, post_visit, ensure_context(ctx))

    def _dfs(self, pre_visit, post_visit, ctx):
        if not self._loaded:
            raise DirNotLoadedError(f"dir {self.id} not loaded")

        if pre_visit is not None:
            pre_visit(ctx, self)

        for sub_dir in self._sub_dirs:
            sub_dir._dfs(pre_visit, post_visit, ctx)

        if post_visit is not None:
            post_visit(ctx, self)

    def dfs_preorder(self, func: DirFunc, ctx: Optional[CancellationContext] = None) -> None:
        """Call func on every loaded Dir, parents before children."""
        self.dfs_walk(func, None, ctx)

    def dfs_postorder(self, func: DirFunc, ctx: Optional[CancellationContext] = None) -> None:
        """Call func on every loaded Dir, children before parents."""
        self.dfs_walk(None, func, ctx)

    def bfs_walk(self, visit: Optional[DirFunc] = None,
                 ctx: Optional[CancellationContext] = None) -> None:
        """Breadth-first walk over loaded Dirs.

        Visits the whole current frontier, then moves on to the frontier
        made of their sub-folders in parent order.

        Raises:
            DirNotLoadedError: On reaching any Dir that is not loaded
        """
        ctx = ensure_context(ctx)
        current_level: List["Dir"] = [self]

        while current_level:
            next_level: List["Dir"] = []
            for dir in current_level:
                if not dir._loaded:
                    raise DirNotLoadedError(f"dir {dir.id} not loaded")
                if visit is not None:
                    visit(ctx, dir)
                next_level.extend(dir._sub_dirs)
            current_level = next_level

    # Derived enumerations

    def all_pure_files(self, ctx: Optional[CancellationContext] = None) -> List[FileEntry]:
        """All files of the loaded subtree, in DFS order."""
        all_files: List[FileEntry] = []

        def add_sub_files(ctx, dir):
            all_files.extend(dir._sub_files)

        self.dfs_walk(add_sub_files, None, ctx)
        return all_files

    def all_folders(self, ctx: Optional[CancellationContext] = None) -> List[FileEntry]:
        """All folders of the loaded subtree, in DFS order.

        Starts with this Dir's own entry unless it is virtual.
        """
        all_folders = self._root_entries()

        def add_sub_folders(ctx, dir):
            all_folders.extend(dir.sub_folders)

        self.dfs_walk(add_sub_folders, None, ctx)
        return all_folders

    def all_folders_and_files(self, ctx: Optional[CancellationContext] = None) -> List[FileEntry]:
        """All entries of the loaded subtree, in DFS order.

        Each Dir contributes its folders then its files in one batch.
        """
        all_entries = self._root_entries()

        def add_sub_folders_and_files(ctx, dir):
            all_entries.extend(dir.sub_folders_and_files)

        self.dfs_walk(add_sub_folders_and_files, None, ctx)
        return all_entries

    def all_folders_and_files_bfs(self, ctx: Optional[CancellationContext] = None) -> List[FileEntry]:
        """All entries of the loaded subtree, in BFS order."""
        all_entries = self._root_entries()

        def add_sub_folders_and_files(ctx, dir):
            all_entries.extend(dir.sub_folders_and_files)

        self.bfs_walk(add_sub_folders_and_files, ctx)
        return all_entries

    def all_folders_and_files_by_level(self, ctx: Optional[CancellationContext] = None) -> List[List[FileEntry]]:
        """All entries of the loaded subtree, grouped by level.

        A non-virtual root forms the first level on its own. For a virtual
        root the first level is its direct children. Levels with no entries
        are returned as empty lists.
        """
        levels: Dict[int, List[FileEntry]] = {}
        if not self.is_virtual:
            min_level = self._depth
            levels[self._depth] = [self._entry]
        else:
            min_level = self._depth + 1
        max_level = min_level

        def add_sub_folders_and_files(ctx, dir):
            nonlocal max_level
            next_level = dir.depth + 1
            if next_level > max_level:
                max_level = next_level
            levels.setdefault(next_level, []).extend(dir.sub_folders_and_files)

        self.bfs_walk(add_sub_folders_and_files, ctx)
        return [levels.get(level, []) for level in range(min_level, max_level + 1)]

    def total_size_and_count(self, ctx: Optional[CancellationContext] = None) -> LoadResult:
        """Sum the direct size and count of every loaded Dir.

        A non-virtual root adds 1 to the count for itself, the same rule the
        bounded loader uses.
        """
        total_size = 0
        total_count = 0 if self.is_virtual else 1

        def add_size_and_count(ctx, dir):
            nonlocal total_size, total_count
            total_size += dir.size
            total_count += dir.count

        self.dfs_walk(add_size_and_count, None, ctx)
        return LoadResult(total_size, total_count)

    def _root_entries(self) -> List[FileEntry]:
        return [] if self.is_virtual else [self._entry]

    def __repr__(self) -> str:
        return (f"Dir(id={self.id}, depth={self._depth}, count={self._count}, "
                f"size={self._size}, loaded={self._loaded})")
