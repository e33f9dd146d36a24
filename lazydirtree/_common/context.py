"""Cancellation context threaded through loads and traversals.

The library itself never polls the context. It is handed to every retrieval
and visit callback so that long-running callbacks can stop a load early.
"""

from typing import Optional

from .errors import LoadCancelledError


class CancellationContext:
    """A cancel flag shared by one load or traversal and its callbacks.

    Example:
        ctx = CancellationContext()

        def retrieve(ctx, volume_id, folder_id):
            ctx.raise_if_cancelled()
            return store.list_children(volume_id, folder_id)
    """

    def __init__(self):
        self._cancelled = False
        self._reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cancellation. Calling it again keeps the first reason."""
        if not self._cancelled:
            self._cancelled = True
            self._reason = reason

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def raise_if_cancelled(self) -> None:
        """Raise LoadCancelledError if cancel() has been called."""
        if self._cancelled:
            raise LoadCancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:
        return f"CancellationContext(cancelled={self._cancelled}, reason={self._reason!r})"


def ensure_context(ctx: Optional[CancellationContext]) -> CancellationContext:
    """Return ctx, or a fresh context when none was supplied."""
    return ctx if ctx is not None else CancellationContext()
