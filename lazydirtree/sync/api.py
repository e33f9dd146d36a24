"""High-level API for lazydirtree.

This module provides simple, functional interfaces for loading a tree and
reading it back. These functions wrap the Dir methods and BoundedLoader for
ease of use in simple cases.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .._common.config import LoadConfig, TraversalStrategy
from .._common.context import CancellationContext
from .._common.dir import Dir, DirFunc
from .._common.entry import FileEntry
from .._common.progress import LoadResult
from .loader import BoundedLoader, RetrieveFunc


def dfs_load(
    root: Dir,
    max_depth: Optional[int] = None,
    count_limit: Optional[int] = None,
    size_limit: Optional[int] = None,
    retrieve: Optional[RetrieveFunc] = None,
    pre_visit: Optional[DirFunc] = None,
    post_visit: Optional[DirFunc] = None,
    ctx: Optional[CancellationContext] = None,
) -> LoadResult:
    """Load a tree depth-first within limits.

    Args:
        root: Top-level Dir to load, may be virtual
        max_depth: Folders at this depth or deeper are not expanded
            (None or negative = default of 100)
        count_limit: Maximum entries loaded (None or negative = 100000)
        size_limit: Maximum total file bytes (None or negative = no limit)
        retrieve: Function fetching one level from the store
        pre_visit: Called on each Dir before its children
        post_visit: Called on each Dir after its children
        ctx: Cancellation context handed to every callback

    Returns:
        LoadResult(total_size, total_count)

    Raises:
        ValueError: If a limit is not an integer

    Example:
        >>> root = Dir.virtual(volume_id=1)
        >>> total_size, total_count = dfs_load(root, retrieve=store.retrieve)
        >>> print(f"{total_count} entries, {total_size} bytes")
    """
    config = LoadConfig(max_depth=max_depth, count_limit=count_limit,
                        size_limit=size_limit)
    loader = BoundedLoader(retrieve, config, pre_visit, post_visit)
    return loader.load(root, ctx)


def walk_dirs(
    root: Dir,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    ctx: Optional[CancellationContext] = None,
) -> Iterator[Tuple[Dir, int]]:
    """Iterate over the loaded Dirs of a tree.

    The walk runs to completion before the first item is yielded, so a
    DirNotLoadedError is raised up front rather than midway.

    Args:
        root: Loaded root Dir
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs)
        ctx: Cancellation context handed to the walk

    Yields:
        Tuples of (dir, depth)
    """
    strategy = _parse_walk_strategy(strategy)
    visited: List[Dir] = []

    def collect(ctx, dir):
        visited.append(dir)

    if strategy == TraversalStrategy.DEPTH_FIRST_PRE:
        root.dfs_preorder(collect, ctx)
    elif strategy == TraversalStrategy.DEPTH_FIRST_POST:
        root.dfs_postorder(collect, ctx)
    else:
        root.bfs_walk(collect, ctx)

    for dir in visited:
        yield dir, dir.depth


def collect_entries(
    root: Dir,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    include_files: bool = True,
    include_folders: bool = True,
    ctx: Optional[CancellationContext] = None,
) -> List[FileEntry]:
    """Flatten the loaded tree into a list of entries.

    The root's own entry is included unless it is virtual. With dfs_post it
    comes last, after every entry below it.

    Args:
        root: Loaded root Dir
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs)
        include_files: Keep file entries
        include_folders: Keep folder entries
        ctx: Cancellation context handed to the walk

    Returns:
        List of FileEntry in traversal order
    """
    strategy = _parse_walk_strategy(strategy)

    if strategy == TraversalStrategy.DEPTH_FIRST_PRE:
        entries = root.all_folders_and_files(ctx)
    elif strategy == TraversalStrategy.DEPTH_FIRST_POST:
        entries = _all_folders_and_files_post_order(root, ctx)
    else:
        entries = root.all_folders_and_files_bfs(ctx)

    return [
        entry for entry in entries
        if (include_files and entry.is_file()) or (include_folders and entry.is_folder())
    ]


def count_entries(root: Dir, ctx: Optional[CancellationContext] = None) -> int:
    """Count the entries of a loaded tree (the root too, unless virtual)."""
    return root.total_size_and_count(ctx).total_count


def get_tree_stats(root: Dir, ctx: Optional[CancellationContext] = None) -> Dict[str, Any]:
    """Get statistics about a loaded tree.

    Args:
        root: Loaded root Dir
        ctx: Cancellation context handed to the walk

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Files: {stats['files']}, folders: {stats['folders']}")
    """
    stats = {
        'total_size': 0,
        'total_count': 0 if root.is_virtual else 1,
        'files': 0,
        'folders': 0 if root.is_virtual else 1,
        'loaded_dirs': 0,
        'max_depth': root.depth,
        'dirs_by_depth': {},
    }

    def add_stats(ctx, dir):
        stats['total_size'] += dir.size
        stats['total_count'] += dir.count
        stats['files'] += len(dir.sub_files)
        stats['folders'] += len(dir.sub_dirs)
        stats['loaded_dirs'] += 1
        stats['max_depth'] = max(stats['max_depth'], dir.depth)

        if dir.depth not in stats['dirs_by_depth']:
            stats['dirs_by_depth'][dir.depth] = 0
        stats['dirs_by_depth'][dir.depth] += 1

    root.dfs_preorder(add_stats, ctx)
    return stats


# Helper functions

def _all_folders_and_files_post_order(root: Dir, ctx: Optional[CancellationContext]) -> List[FileEntry]:
    entries: List[FileEntry] = []

    def add_sub_folders_and_files(ctx, dir):
        entries.extend(dir.sub_folders_and_files)

    root.dfs_postorder(add_sub_folders_and_files, ctx)
    if not root.is_virtual:
        entries.append(root.entry)
    return entries


_STRATEGY_NAMES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}


def _parse_walk_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy name for the flat walks.

    Level order produces nested lists, so it is refused here and pointed at
    the Dir method that returns them.

    Raises:
        ValueError: For unknown names and for level order
    """
    if not isinstance(strategy, TraversalStrategy):
        try:
            strategy = _STRATEGY_NAMES[strategy.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown traversal strategy: {strategy}") from None

    if strategy == TraversalStrategy.LEVEL_ORDER:
        raise ValueError(
            "level order is not a flat walk; "
            "use Dir.all_folders_and_files_by_level() instead"
        )
    return strategy
