#!/usr/bin/env python3
"""
Async loading example for lazydirtree.

This example demonstrates:
- Loading with a coroutine retrieval function (e.g. an HTTP client)
- Stopping a long load through the cancellation context
- Pre-seeding the first level by hand
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazydirtree.aio import CancellationContext, Dir, LoadCancelledError, dfs_load_async
from lazydirtree.testing import build_sample_store


async def main():
    """Demonstrate async loading with cancellation."""
    store = build_sample_store()

    # Give up after three folder requests
    ctx = CancellationContext()

    async def limited_retrieve(ctx, volume_id, folder_id):
        ctx.raise_if_cancelled()
        if len(store.calls) >= 3:
            ctx.cancel("request budget used up")
            ctx.raise_if_cancelled()
        return await store.retrieve_async(ctx, volume_id, folder_id)

    root = Dir.virtual(volume_id=1)
    try:
        await dfs_load_async(root, retrieve=limited_retrieve, ctx=ctx)
    except LoadCancelledError as e:
        print(f"Load cancelled: {e}")

    # The first level is already known: fill it, then load the rest
    root = Dir.virtual(volume_id=1)
    root.fill(*store.list_children(1, 0))
    result = await dfs_load_async(root, retrieve=store.retrieve_async)
    print(f"Loaded {result.total_count} entries, {result.total_size} bytes")

    for entry in root.all_folders_and_files_bfs():
        print(f"  {entry.kind_label:<6} {entry.name}")


if __name__ == "__main__":
    asyncio.run(main())
