"""Async bounded loader.

Same walk as lazydirtree.sync.loader.BoundedLoader, for retrieval
functions that are coroutines. Siblings are still loaded one after another;
the only difference is that the walk yields to the event loop while the
store is being queried.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, Tuple, Union

from .._common.config import LoadConfig
from .._common.context import CancellationContext, ensure_context
from .._common.dir import Dir
from .._common.entry import FileEntry
from .._common.errors import NoRetrieveFuncError
from .._common.progress import LoadProgress, LoadResult

logger = logging.getLogger(__name__)


AsyncRetrieveFunc = Callable[
    [CancellationContext, int, int],
    Awaitable[Tuple[Sequence[FileEntry], Sequence[FileEntry]]],
]

# Visit callbacks may be plain functions or coroutine functions
AsyncDirFunc = Callable[[CancellationContext, Dir], Union[None, Awaitable[None]]]


class AsyncBoundedLoader:
    """Async depth-first loader with depth, count and size limits.

    Args:
        retrieve: Coroutine function fetching one folder level
        config: Load limits (defaults to LoadConfig())
        pre_visit: Called on each Dir before its children are loaded
        post_visit: Called on each Dir after all its children are done

    Raises:
        ValueError: If config holds a non-integer limit
    """

    def __init__(self,
                 retrieve: Optional[AsyncRetrieveFunc] = None,
                 config: Optional[LoadConfig] = None,
                 pre_visit: Optional[AsyncDirFunc] = None,
                 post_visit: Optional[AsyncDirFunc] = None):
        self.retrieve = retrieve
        self.config = config or LoadConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.pre_visit = pre_visit
        self.post_visit = post_visit

    async def load(self, root: Dir, ctx: Optional[CancellationContext] = None) -> LoadResult:
        """Load root and its descendants within the configured limits.

        Returns:
            LoadResult(total_size, total_count) for everything loaded
        """
        ctx = ensure_context(ctx)
        progress = LoadProgress(self.config)
        progress.count_root(root)
        await self._load_dir(root, progress, ctx)
        return progress.result()

    async def _load_dir(self, dir: Dir, progress: LoadProgress, ctx: CancellationContext) -> None:
        progress.check_expandable(dir)

        await _call_visit(self.pre_visit, ctx, dir)

        if not dir.loaded:
            await self._fetch(dir, ctx)

        progress.account(dir)

        for sub_dir in dir.sub_dirs:
            await self._load_dir(sub_dir, progress, ctx)

        await _call_visit(self.post_visit, ctx, dir)

    async def _fetch(self, dir: Dir, ctx: CancellationContext) -> None:
        if self.retrieve is None:
            raise NoRetrieveFuncError(f"dir {dir.id} is not loaded and no retrieve function was given")

        logger.debug("retrieving children: volume=%s folder=%s depth=%d",
                     dir.volume_id, dir.id, dir.depth)
        files, folders = await self.retrieve(ctx, dir.volume_id, dir.id)
        dir.fill(files, folders)
        logger.debug("filled dir %s: count=%d size=%d", dir.id, dir.count, dir.size)


async def _call_visit(func: Optional[AsyncDirFunc], ctx: CancellationContext, dir: Dir) -> Any:
    if func is None:
        return None
    result = func(ctx, dir)
    if inspect.isawaitable(result):
        result = await result
    return result
