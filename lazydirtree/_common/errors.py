"""Exceptions raised by lazydirtree.

Every error is terminal to the operation that raised it. Exceptions raised
by user callbacks (retrieval or visit functions) are never wrapped: they
reach the caller exactly as raised.
"""

from typing import Any, Optional


class DirTreeError(Exception):
    """Base class for all lazydirtree errors."""
    pass


class DirAlreadyLoadedError(DirTreeError):
    """Raised when a Dir that is already loaded is filled again."""
    pass


class DirNotLoadedError(DirTreeError):
    """Raised when traversing or enumerating a Dir that was never loaded."""
    pass


class NoRetrieveFuncError(DirTreeError):
    """Raised when a load needs to fetch children but has no retrieval function."""
    pass


class NotFolderError(DirTreeError):
    """Raised when a file entry is treated as an expandable folder."""
    pass


class LoadCancelledError(DirTreeError):
    """Raised by CancellationContext.raise_if_cancelled() after cancel()."""
    pass


class LoadLimitError(DirTreeError):
    """Base class for bounded-load limit violations.

    Attributes:
        dir: The Dir being processed when the limit was hit
        current: The value that broke the limit (depth, count or size)
        limit: The configured limit
    """

    label = "limit"

    def __init__(self, dir: Any = None, current: Optional[int] = None,
                 limit: Optional[int] = None):
        self.dir = dir
        self.current = current
        self.limit = limit
        super().__init__(f"{self.label} exceeded: current={current}, limit={limit}")


class MaxDepthExceededError(LoadLimitError):
    """Raised when a load reaches a folder at or beyond max_depth."""
    label = "max path depth"


class FileCountExceededError(LoadLimitError):
    """Raised when the running entry count goes over count_limit."""
    label = "file count"


class TotalSizeExceededError(LoadLimitError):
    """Raised when the running total size goes over size_limit."""
    label = "total size"
