from __future__ import annotations

from typing import Protocol, runtime_checkable

from kibkit.domain.models import SnackbarOptions


class NotificationSurface(Protocol):
    """Where short user-facing messages are displayed."""

    def show(self, text: str, options: SnackbarOptions) -> None:
        """Display *text*; raise if no surface is available."""
        ...  # pragma: no cover

    def clear(self) -> None:
        """Drop whatever message is currently displayed."""
        ...  # pragma: no cover


@runtime_checkable
class Disposable(Protocol):
    def dispose(self) -> None: ...  # pragma: no cover


@runtime_checkable
class Closable(Protocol):
    def close(self) -> None: ...  # pragma: no cover
