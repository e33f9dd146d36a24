"""Tests for the async bounded loader."""

import asyncio

import pytest

from lazydirtree.aio import (
    AsyncBoundedLoader,
    CancellationContext,
    Dir,
    FileCountExceededError,
    LoadCancelledError,
    LoadConfig,
    MaxDepthExceededError,
    NoRetrieveFuncError,
    TotalSizeExceededError,
    dfs_load_async,
)
from lazydirtree.testing import build_sample_store


@pytest.fixture
def store():
    return build_sample_store()


@pytest.fixture
def root():
    return Dir.virtual(volume_id=1)


@pytest.mark.asyncio
async def test_unrestricted_load(store, root):
    total_size, total_count = await dfs_load_async(root, -1, -1, -1, store.retrieve_async)
    assert total_count == 19
    assert total_size == 10
    assert ([entry.id for entry in root.all_pure_files()]
            == [10, 11, 20, 21, 30, 31, 32, 41, 34, 42])


@pytest.mark.asyncio
async def test_max_depth_exceeded(store, root):
    with pytest.raises(MaxDepthExceededError):
        await dfs_load_async(root, max_depth=2, retrieve=store.retrieve_async)


@pytest.mark.asyncio
async def test_file_count_exceeded(store, root):
    with pytest.raises(FileCountExceededError):
        await dfs_load_async(root, count_limit=18, retrieve=store.retrieve_async)


@pytest.mark.asyncio
async def test_total_size_exceeded(store, root):
    with pytest.raises(TotalSizeExceededError):
        await dfs_load_async(root, size_limit=9, retrieve=store.retrieve_async)


@pytest.mark.asyncio
async def test_string_limit_rejected(store, root):
    with pytest.raises(ValueError, match="Invalid configuration: max_depth"):
        await dfs_load_async(root, max_depth="2", retrieve=store.retrieve_async)
    assert store.calls == []
    assert not root.loaded


def test_float_limit_rejected_by_loader(store):
    with pytest.raises(ValueError, match="count_limit must be an integer"):
        AsyncBoundedLoader(store.retrieve_async, LoadConfig(count_limit=18.5))


@pytest.mark.asyncio
async def test_no_retrieve_function(root):
    with pytest.raises(NoRetrieveFuncError):
        await dfs_load_async(root)


@pytest.mark.asyncio
async def test_async_and_sync_visit_callbacks(store, root):
    pre, post = [], []

    async def record_pre(ctx, dir):
        await asyncio.sleep(0)
        pre.append(dir.id)

    def record_post(ctx, dir):
        post.append(dir.id)

    await dfs_load_async(root, retrieve=store.retrieve_async,
                         pre_visit=record_pre, post_visit=record_post)
    assert pre == [0, 12, 22, 33, 23, 35, 36, 13, 24, 37]
    assert post == [33, 22, 35, 36, 23, 12, 37, 24, 13, 0]


@pytest.mark.asyncio
async def test_async_visit_error_aborts(store, root):
    async def stop_at_13(ctx, dir):
        if dir.id == 13:
            raise LookupError("no access")

    with pytest.raises(LookupError, match="no access"):
        await dfs_load_async(root, retrieve=store.retrieve_async, pre_visit=stop_at_13)
    assert (1, 13) not in store.calls


@pytest.mark.asyncio
async def test_retrieve_error_propagates(store, root):
    failure = ConnectionError("volume offline")
    store.fail_on(1, 12, failure)

    with pytest.raises(ConnectionError) as exc_info:
        await dfs_load_async(root, retrieve=store.retrieve_async)
    assert exc_info.value is failure
    assert root.loaded


@pytest.mark.asyncio
async def test_context_cancellation(store, root):
    ctx = CancellationContext()

    async def retrieve(ctx, volume_id, folder_id):
        ctx.raise_if_cancelled()
        result = await store.retrieve_async(ctx, volume_id, folder_id)
        ctx.cancel()
        return result

    with pytest.raises(LoadCancelledError):
        await dfs_load_async(root, retrieve=retrieve, ctx=ctx)
    assert store.calls == [(1, 0)]


@pytest.mark.asyncio
async def test_task_cancellation(root):
    started = asyncio.Event()

    async def slow_retrieve(ctx, volume_id, folder_id):
        started.set()
        await asyncio.sleep(3600)
        return [], []

    task = asyncio.create_task(dfs_load_async(root, retrieve=slow_retrieve))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert not root.loaded


@pytest.mark.asyncio
async def test_loader_class(store, root):
    loader = AsyncBoundedLoader(store.retrieve_async, LoadConfig(max_depth=4))
    assert await loader.load(root) == (10, 19)

    # Second pass over a loaded tree fetches nothing
    calls = list(store.calls)
    assert await AsyncBoundedLoader().load(root) == (10, 19)
    assert store.calls == calls
