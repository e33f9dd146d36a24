"""lazydirtree - Lazily loaded trees over remote directory stores.

lazydirtree mirrors a paginated folder hierarchy (entries identified by
IDs, grouped by volume) as an in-memory tree that is filled one folder level
at a time through a retrieval function you supply, with depth, count and
size limits on recursive loads.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from lazydirtree.sync import Dir, dfs_load

Asynchronous:
    from lazydirtree.aio import Dir, dfs_load_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both share the same Dir model and traversal methods; only the loader
differs, depending on whether your retrieval function blocks or awaits.
"""

__version__ = "0.1.0"

from . import sync
from . import aio

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
]
