from __future__ import annotations

from typing import override

from loguru import logger

from kibkit.application.ports import NotificationSurface
from kibkit.domain.models import SnackbarBehavior, SnackbarOptions
from kibkit.infrastructure.error import NotificationDeliveryError


def _render(text: str, options: SnackbarOptions) -> str:
    parts = [f"[{options.duration_seconds}s]"]
    if options.behavior is SnackbarBehavior.FLOATING:
        parts.append("(floating)")
    parts.append(text)
    if options.action is not None:
        parts.append(f"[{options.action.label}]")
    if options.show_close_icon:
        parts.append("[x]")
    return " ".join(parts)


class ConsoleNotificationSurface(NotificationSurface):
    """Show notifications as log lines, one visible message at a time."""

    def __init__(self) -> None:
        self.current: str | None = None
        self.shown: list[str] = []

    @override
    def show(self, text: str, options: SnackbarOptions) -> None:
        try:
            rendered = _render(text, options)
            logger.info(rendered)
        except Exception as e:
            logger.opt(exception=e).exception("Console notify failed")
            raise NotificationDeliveryError(
                message="Console notification failed", context={"error": repr(e)}
            ) from e
        self.current = text
        self.shown.append(text)
        if options.on_visible is not None:
            options.on_visible()

    @override
    def clear(self) -> None:
        self.current = None
