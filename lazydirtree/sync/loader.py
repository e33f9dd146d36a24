"""Bounded recursive loading for lazydirtree.

The loader walks a Dir depth-first and calls the retrieval function on
every unloaded folder it reaches, stopping at the first limit violation.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple

from .._common.config import LoadConfig
from .._common.context import CancellationContext, ensure_context
from .._common.dir import Dir, DirFunc
from .._common.entry import FileEntry
from .._common.errors import NoRetrieveFuncError
from .._common.progress import LoadProgress, LoadResult

logger = logging.getLogger(__name__)


# Returns (files, folders) directly under folder_id in volume_id
RetrieveFunc = Callable[
    [CancellationContext, int, int],
    Tuple[Sequence[FileEntry], Sequence[FileEntry]],
]


class BoundedLoader:
    """Depth-first loader with depth, count and size limits.

    Per Dir the order is: expansion checks, pre_visit, retrieve and fill
    (only if not loaded yet), accounting and limit checks, children, then
    post_visit. The first exception aborts the whole load. Levels filled
    before the failure stay loaded.

    Args:
        retrieve: Function fetching one folder level from the store
        config: Load limits (defaults to LoadConfig())
        pre_visit: Called on each Dir before its children are loaded
        post_visit: Called on each Dir after all its children are done

    Raises:
        ValueError: If config holds a non-integer limit
    """

    def __init__(self,
                 retrieve: Optional[RetrieveFunc] = None,
                 config: Optional[LoadConfig] = None,
                 pre_visit: Optional[DirFunc] = None,
                 post_visit: Optional[DirFunc] = None):
        self.retrieve = retrieve
        self.config = config or LoadConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.pre_visit = pre_visit
        self.post_visit = post_visit

    def load(self, root: Dir, ctx: Optional[CancellationContext] = None) -> LoadResult:
        """Load root and its descendants within the configured limits.

        Args:
            root: Top-level Dir, may be virtual
            ctx: Cancellation context handed to every callback

        Returns:
            LoadResult(total_size, total_count) for everything loaded

        Raises:
            MaxDepthExceededError, FileCountExceededError,
            TotalSizeExceededError: When a limit is hit
            NoRetrieveFuncError: If an unloaded Dir is reached without retrieve
            Exception: Anything raised by retrieve or a visit callback
        """
        ctx = ensure_context(ctx)
        progress = LoadProgress(self.config)
        progress.count_root(root)
        self._load_dir(root, progress, ctx)
        return progress.result()

    def _load_dir(self, dir: Dir, progress: LoadProgress, ctx: CancellationContext) -> None:
        progress.check_expandable(dir)

        if self.pre_visit is not None:
            self.pre_visit(ctx, dir)

        if not dir.loaded:
            self._fetch(dir, ctx)

        progress.account(dir)

        for sub_dir in dir.sub_dirs:
            self._load_dir(sub_dir, progress, ctx)

        if self.post_visit is not None:
            self.post_visit(ctx, dir)

    def _fetch(self, dir: Dir, ctx: CancellationContext) -> None:
        if self.retrieve is None:
            raise NoRetrieveFuncError(f"dir {dir.id} is not loaded and no retrieve function was given")

        logger.debug("retrieving children: volume=%s folder=%s depth=%d",
                     dir.volume_id, dir.id, dir.depth)
        files, folders = self.retrieve(ctx, dir.volume_id, dir.id)
        dir.fill(files, folders)
        logger.debug("filled dir %s: count=%d size=%d", dir.id, dir.count, dir.size)
