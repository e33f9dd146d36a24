"""Asynchronous implementation of lazydirtree.

This package contains the async loader, for retrieval functions that are
coroutines (network or database clients). Loading stays sequential: one
folder level is awaited at a time.
"""

# Core components (shared with sync)
from .._common.dir import Dir
from .._common.entry import EntryKind, FileEntry
from .._common.context import CancellationContext
from .._common.progress import LoadResult
from .._common.config import LoadConfig, TraversalStrategy
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

# Async loading
from .loader import AsyncBoundedLoader, AsyncRetrieveFunc, AsyncDirFunc
from .api import dfs_load_async

__all__ = [
    'Dir',
    'EntryKind',
    'FileEntry',
    'CancellationContext',
    'LoadResult',
    'LoadConfig',
    'TraversalStrategy',
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
    'AsyncBoundedLoader',
    'AsyncRetrieveFunc',
    'AsyncDirFunc',
    'dfs_load_async',
]
