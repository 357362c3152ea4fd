"""Application query – cooperative yielding."""
from __future__ import annotations

import asyncio


async def cooperative_yield() -> None:
    """Hand control back to the running event loop without sleeping."""
    await asyncio.sleep(0)


def is_checkpoint(index: int, every: int) -> bool:
    """``True`` for every *every*-th scanned item, excluding the first."""
    return index > 0 and index % every == 0


__all__ = ["cooperative_yield", "is_checkpoint"]
