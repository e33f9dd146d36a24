"""Synchronous implementation of lazydirtree.

This package contains the blocking loader, for retrieval functions that
return their results directly. Traversal of an already-loaded tree is the
same in both packages and needs no I/O.
"""

# Core components
from .._common.dir import Dir, DirFunc
from .._common.entry import EntryKind, FileEntry
from .._common.context import CancellationContext
from .._common.progress import LoadResult
from .loader import BoundedLoader, RetrieveFunc

# Configuration
from .._common.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_TOTAL_COUNT,
    LoadConfig,
    TraversalStrategy,
)

# Errors
from .._common.errors import (
    DirTreeError,
    DirAlreadyLoadedError,
    DirNotLoadedError,
    NoRetrieveFuncError,
    NotFolderError,
    LoadCancelledError,
    LoadLimitError,
    MaxDepthExceededError,
    FileCountExceededError,
    TotalSizeExceededError,
)

# High-level API
from .api import (
    dfs_load,
    walk_dirs,
    collect_entries,
    count_entries,
    get_tree_stats,
)

__all__ = [
    # Core
    'Dir',
    'DirFunc',
    'EntryKind',
    'FileEntry',
    'CancellationContext',
    'LoadResult',
    'BoundedLoader',
    'RetrieveFunc',
    # Config
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_MAX_TOTAL_COUNT',
    'LoadConfig',
    'TraversalStrategy',
    # Errors
    'DirTreeError',
    'DirAlreadyLoadedError',
    'DirNotLoadedError',
    'NoRetrieveFuncError',
    'NotFolderError',
    'LoadCancelledError',
    'LoadLimitError',
    'MaxDepthExceededError',
    'FileCountExceededError',
    'TotalSizeExceededError',
    # API
    'dfs_load',
    'walk_dirs',
    'collect_entries',
    'count_entries',
    'get_tree_stats',
]
