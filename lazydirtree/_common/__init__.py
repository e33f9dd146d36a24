"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Entry descriptors and the Dir tree node
- Traversal primitives over already-loaded Dirs
- Configuration, errors and load accounting

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_TOTAL_COUNT,
    LoadConfig,
    TraversalStrategy,
)
from .context import CancellationContext, ensure_context
from .dir import Dir, DirFunc
from .entry import EntryKind, FileEntry
from .errors import (
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
from .progress import LoadProgress, LoadResult

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_MAX_TOTAL_COUNT',
    'LoadConfig',
    'TraversalStrategy',
    'CancellationContext',
    'ensure_context',
    'Dir',
    'DirFunc',
    'EntryKind',
    'FileEntry',
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
    'LoadProgress',
    'LoadResult',
]
