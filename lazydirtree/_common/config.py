"""Configuration system for lazydirtree.

This module defines how users bound a recursive load (depth, entry count,
total size) and which order they want to walk a loaded tree in.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


# Guards against unbounded recursion on malformed or cyclic backing data
DEFAULT_MAX_DEPTH = 100
DEFAULT_MAX_TOTAL_COUNT = 100000


class TraversalStrategy(Enum):
    """How to walk an already-loaded tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # BFS grouped by level


@dataclass
class LoadConfig:
    """Limits for a bounded recursive load.

    None or a negative value means "use the default" for max_depth and
    count_limit, and "no limit" for size_limit. The sign is the sentinel
    for size_limit; it is never replaced by a default value.
    """

    max_depth: Optional[int] = None     # Folders at depth >= max_depth are not expanded
    count_limit: Optional[int] = None   # Maximum number of entries loaded
    size_limit: Optional[int] = None    # Maximum total bytes of loaded files

    @classmethod
    def unbounded(cls) -> 'LoadConfig':
        """Create config using the default safety limits and no size limit."""
        return cls()

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'LoadConfig':
        """Create config that expands folders above max_depth only.

        Args:
            max_depth: Depth at which expansion stops (default 1 = root only)

        Returns:
            LoadConfig for shallow loading
        """
        return cls(max_depth=max_depth)

    def resolved(self) -> 'LoadConfig':
        """Return a copy with defaults applied.

        Returns:
            LoadConfig whose max_depth and count_limit are concrete integers
            and whose size_limit is None when unlimited
        """
        max_depth = self.max_depth
        if max_depth is None or max_depth < 0:
            max_depth = DEFAULT_MAX_DEPTH

        count_limit = self.count_limit
        if count_limit is None or count_limit < 0:
            count_limit = DEFAULT_MAX_TOTAL_COUNT

        size_limit = self.size_limit
        if size_limit is not None and size_limit < 0:
            size_limit = None

        return replace(self, max_depth=max_depth, count_limit=count_limit,
                       size_limit=size_limit)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for name in ("max_depth", "count_limit", "size_limit"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                errors.append(f"{name} must be an integer or None, got {value!r}")
        return errors
