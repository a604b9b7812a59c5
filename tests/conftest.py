from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from kibkit.domain.models import SnackbarOptions, ThemeData
from kibkit.ui.component import BuildContext


class RecordingSurface:
    """Notification surface that remembers what it was asked to show."""

    def __init__(self) -> None:
        self.shown: list[tuple[str, SnackbarOptions]] = []
        self.clears = 0

    def show(self, text: str, options: SnackbarOptions) -> None:
        self.shown.append((text, options))

    def clear(self) -> None:
        self.clears += 1


class BrokenSurface:
    def show(self, text: str, options: SnackbarOptions) -> None:
        raise LookupError("no active surface")

    def clear(self) -> None:
        pass


@pytest.fixture
def fake_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Settings independent from the developer's environment."""
    for name in ("KIB_LOG_LEVEL", "KIB_SNACKBAR_DURATION", "KIB_THEME", "KIB_DEMO_DELAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("KIB_DEMO_DELAY", "0")


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def context(surface: RecordingSurface) -> BuildContext:
    return BuildContext(theme=ThemeData.light(), notifications=surface)


@pytest.fixture
def renders() -> list[Any]:
    return []


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route loguru records into pytest's caplog."""
    caplog.set_level(0)
    sink_id = logger.add(caplog.handler, level=0, format="{message}")
    yield caplog
    logger.remove(sink_id)


@pytest.fixture
def broken_surface() -> BrokenSurface:
    return BrokenSurface()
