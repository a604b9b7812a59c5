from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger

_pending: set[asyncio.Task[None]] = set()


async def _run_after_frame(callback: Callable[[], Awaitable[None]]) -> None:
    try:
        await callback()
    except Exception as e:
        logger.opt(exception=e).error(f"** postFrame: {e}")


def post_frame(
    callback: Callable[[], Awaitable[None]],
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Task[None]:
    """Run *callback* once the code currently on the loop has finished.

    Useful for work that needs the current build to complete first, such as
    showing a notification right after mounting. Exceptions raised by the
    callback are logged and swallowed; cancellation is not.
    """
    loop = loop or asyncio.get_running_loop()
    task = loop.create_task(_run_after_frame(callback), name="post-frame")
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task
