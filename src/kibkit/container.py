from __future__ import annotations

from contextlib import contextmanager
from typing import Awaitable, Iterator

from dependency_injector import containers, providers

from kibkit.application.ports import NotificationSurface
from kibkit.application.scoped_provider import ScopedProvider
from kibkit.domain.models import SnackbarOptions, ThemeData
from kibkit.infrastructure.notifier.console import ConsoleNotificationSurface
from kibkit.ui.component import BuildContext

from .config import Settings

# ---------- low-level resources ----------


@contextmanager
def _root_scope_resource() -> Iterator[ScopedProvider]:
    scope = ScopedProvider()
    try:
        yield scope
    finally:
        scope.dispose()


# ---------- DI container ----------
class AppContainer(containers.DeclarativeContainer):
    """Dependency Injector container for the app."""

    settings = providers.Singleton(Settings)
    container_config = providers.Configuration()

    theme = providers.Singleton(ThemeData.named, container_config.theme)

    notifications: providers.Singleton[NotificationSurface] = providers.Singleton(
        ConsoleNotificationSurface
    )
    snackbar_options = providers.Factory(
        SnackbarOptions,
        duration_seconds=container_config.snackbar_duration_seconds.as_int(),
    )

    root_scope = providers.Resource(_root_scope_resource)

    build_context = providers.Factory(
        BuildContext,
        theme=theme,
        notifications=notifications,
        scope=root_scope,
        snackbar_options=snackbar_options,
    )


# ---------- bootstrap helpers ----------


async def build_container(settings: Settings) -> AppContainer:
    """Create container, load config, init resources."""
    container = AppContainer()
    container.settings.override(providers.Object(settings))
    container.container_config.from_pydantic(settings)  # pyright: ignore
    aw = container.init_resources()
    if isinstance(aw, Awaitable):
        await aw
    return container


async def shutdown_container(container: AppContainer) -> None:
    """Graceful shutdown of resources."""
    aw = container.shutdown_resources()
    if isinstance(aw, Awaitable):
        await aw
