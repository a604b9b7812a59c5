from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from loguru import logger

from kibkit.domain.exceptions import WrappedError
from kibkit.errors import KibError

P = ParamSpec("P")
R = TypeVar("R")


def wrap_exceptions(message: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log and wrap unclassified errors into :class:`WrappedError`.

    Errors that already belong to the :class:`KibError` family pass through
    untouched so callers can still match on them.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except KibError:
                    raise
                except Exception as exc:
                    logger.opt(exception=exc).error(f"{message}: {exc!r}")
                    raise WrappedError.wrap(exc, message) from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except KibError:
                raise
            except Exception as exc:
                logger.opt(exception=exc).error(f"{message}: {exc!r}")
                raise WrappedError.wrap(exc, message) from exc

        return sync_wrapper  # type: ignore[return-value]

    return decorator
