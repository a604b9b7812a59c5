from __future__ import annotations

import asyncio
from typing import Awaitable

import typer
from dependency_injector.wiring import Provide, inject
from loguru import logger

from kibkit.application.ports import NotificationSurface
from kibkit.demo import FailureMode, UserDataScreen
from kibkit.domain.models import SnackbarOptions
from kibkit.logs import setup_logging
from kibkit.result import Failure
from kibkit.ui.component import BuildContext, StatefulComponent
from kibkit.ui.snackbar import show_message

from .config import Settings
from .container import AppContainer, build_container, shutdown_container

app = typer.Typer(
    name="kibkit",
    help="Try out the kibkit component helpers from the terminal",
)


async def entry_point(func: Awaitable[int]) -> int:
    settings = Settings()
    setup_logging(settings.log_level)
    container = await build_container(settings)
    container.wire(modules=[__name__])
    try:
        return await func
    finally:
        await shutdown_container(container)
        container.unwire()


@inject
async def _demo(
    failure_mode: FailureMode,
    settings: Settings = Provide[AppContainer.settings],
    context: BuildContext = Provide[AppContainer.build_context],
) -> int:
    def render(component: StatefulComponent) -> None:
        typer.echo(component.build(context))

    screen = UserDataScreen(
        failure_mode, delay=settings.demo_delay_seconds, on_render=render
    )
    screen.mount()
    try:
        typer.echo(screen.build(context))
        result = await screen.fetch_user_data()
        screen.inform_user(screen.status_message)
    finally:
        screen.unmount()
    return 0 if result.is_success else 1


@inject
async def _notify(
    message: str,
    duration: int | None,
    surface: NotificationSurface = Provide[AppContainer.notifications],
    options: SnackbarOptions = Provide[AppContainer.snackbar_options],
) -> int:
    overrides = {} if duration is None else {"duration_seconds": duration}
    result = show_message(surface, message, options, **overrides)
    if isinstance(result, Failure):
        logger.error(f"notify failed: {result.error}")
        typer.echo(str(result.error), err=True)
        return 1
    return 0


@app.command("demo", help="Run a tracked fetch on a sample screen")
def demo(
    fail: FailureMode = typer.Option(
        FailureMode.NONE,
        "--fail",
        help="Make the fetch fail with a network error or an unexpected crash",
    ),
) -> None:
    raise typer.Exit(asyncio.run(entry_point(_demo(fail))))


@app.command("notify", help="Show MESSAGE on the console notification surface")
def notify(
    message: str,
    duration: int | None = typer.Option(
        None, "--duration", "-d", min=1, help="Display time, seconds"
    ),
) -> None:
    raise typer.Exit(asyncio.run(entry_point(_notify(message, duration))))


@app.callback()
def root() -> None:
    """Root command for kibkit."""


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
