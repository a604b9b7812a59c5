from __future__ import annotations

import traceback
from traceback import StackSummary
from typing import Any

from kibkit.application.ports import NotificationSurface
from kibkit.domain.exceptions import WrappedError
from kibkit.domain.models import SnackbarOptions
from kibkit.result import Result, try_result


def _snackbar_error(err: Exception) -> Exception:
    return WrappedError(
        message=f"Error, {type(err).__name__}, encountered while showing snackbar",
        error_kind=type(err),
        cause=err,
        trace=err.__traceback__
        or StackSummary.from_list(traceback.extract_stack()[:-1]),
    )


def show_message(
    surface: NotificationSurface,
    message: str,
    options: SnackbarOptions | None = None,
    **overrides: Any,
) -> Result[None, Exception]:
    """Replace whatever *surface* shows with *message*.

    *overrides* are applied on top of *options* (or the defaults), e.g.
    ``show_message(surface, "Saved", background_color="green",
    show_close_icon=True)``.

    Never raises: a surface failure comes back as a ``Failure`` holding a
    :class:`WrappedError` whose ``cause`` is the original exception.
    """

    def _show() -> None:
        opts = options or SnackbarOptions()
        if overrides:
            opts = SnackbarOptions.model_validate(
                {**dict(opts), **overrides}
            )
        surface.clear()
        surface.show(message, opts)

    return try_result(_show, _snackbar_error)
