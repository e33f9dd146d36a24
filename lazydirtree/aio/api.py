"""High-level async API for lazydirtree."""

from typing import Optional

from .._common.config import LoadConfig
from .._common.context import CancellationContext
from .._common.dir import Dir
from .._common.progress import LoadResult
from .loader import AsyncBoundedLoader, AsyncDirFunc, AsyncRetrieveFunc


async def dfs_load_async(
    root: Dir,
    max_depth: Optional[int] = None,
    count_limit: Optional[int] = None,
    size_limit: Optional[int] = None,
    retrieve: Optional[AsyncRetrieveFunc] = None,
    pre_visit: Optional[AsyncDirFunc] = None,
    post_visit: Optional[AsyncDirFunc] = None,
    ctx: Optional[CancellationContext] = None,
) -> LoadResult:
    """Load a tree depth-first within limits, awaiting each retrieval.

    Takes the same arguments as lazydirtree.sync.dfs_load, except that
    retrieve is a coroutine function and the visit callbacks may be.

    Example:
        >>> root = Dir.virtual(volume_id=1)
        >>> result = await dfs_load_async(root, retrieve=client.list_folder)
        >>> print(result.total_count)
    """
    config = LoadConfig(max_depth=max_depth, count_limit=count_limit,
                        size_limit=size_limit)
    loader = AsyncBoundedLoader(retrieve, config, pre_visit, post_visit)
    return await loader.load(root, ctx)
