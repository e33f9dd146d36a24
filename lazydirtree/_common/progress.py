"""Running totals and limit checks for bounded loads.

Both the sync and the async loader drive the same LoadProgress object, so
the accounting rules live here once. A LoadProgress is created per load and
handed down the recursion explicitly.
"""

import logging
from typing import NamedTuple

from .config import LoadConfig
from .errors import (
    NotFolderError,
    MaxDepthExceededError,
    FileCountExceededError,
    TotalSizeExceededError,
)

logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    """Totals returned by a successful load or aggregation."""
    total_size: int
    total_count: int


class LoadProgress:
    """Accumulator shared by every level of one bounded load.

    Args:
        config: Limits for the load; defaults are applied here
    """

    def __init__(self, config: LoadConfig):
        self.limits = config.resolved()
        self.total_size = 0
        self.total_count = 0

    def count_root(self, root) -> None:
        """Count the root's own entry unless it is virtual."""
        if not root.is_virtual:
            self.total_count += 1

    def check_expandable(self, dir) -> None:
        """Checks run before any work happens at a Dir.

        Raises:
            NotFolderError: If the Dir wraps a file entry
            MaxDepthExceededError: If the Dir sits at or below max_depth
        """
        if not dir.entry.is_folder():
            raise NotFolderError(f"entry {dir.id} is a {dir.entry.kind_label}, not a folder")

        if dir.depth >= self.limits.max_depth:
            logger.warning("max recursion depth reached: dir=%s depth=%d max_depth=%d",
                           dir.id, dir.depth, self.limits.max_depth)
            raise MaxDepthExceededError(dir, dir.depth, self.limits.max_depth)

    def account(self, dir) -> None:
        """Add a loaded Dir's direct stats to the totals, then check limits.

        The Dir that trips a limit is included in the totals.

        Raises:
            FileCountExceededError: If the running count is over count_limit
            TotalSizeExceededError: If a size limit is set and exceeded
        """
        self.total_count += dir.count
        self.total_size += dir.size

        if self.total_count > self.limits.count_limit:
            logger.warning("file count limit reached: dir=%s total_count=%d count_limit=%d",
                           dir.id, self.total_count, self.limits.count_limit)
            raise FileCountExceededError(dir, self.total_count, self.limits.count_limit)

        size_limit = self.limits.size_limit
        if size_limit is not None and self.total_size > size_limit:
            logger.warning("total size limit reached: dir=%s total_size=%d size_limit=%d",
                           dir.id, self.total_size, size_limit)
            raise TotalSizeExceededError(dir, self.total_size, size_limit)

    def result(self) -> LoadResult:
        return LoadResult(self.total_size, self.total_count)

    def __repr__(self) -> str:
        return (f"LoadProgress(total_size={self.total_size}, "
                f"total_count={self.total_count}, limits={self.limits})")
