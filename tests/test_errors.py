import pytest

from kibkit.domain.models import SnackbarAction, SnackbarBehavior, SnackbarOptions
from kibkit.errors import KibError
from kibkit.infrastructure.error import InfraError, NotificationDeliveryError
from kibkit.infrastructure.notifier.console import ConsoleNotificationSurface


def test_notification_delivery_error_fields() -> None:
    err = NotificationDeliveryError(message="nope", context={"error": "x"})
    assert str(err) == "nope"
    assert err.code == "INFRA_NOTIFICATION_FAILED"
    assert isinstance(err, InfraError) and isinstance(err, KibError)


def test_console_surface_logs_rendered_message(
    loguru_caplog: pytest.LogCaptureFixture,
) -> None:
    surface = ConsoleNotificationSurface()
    visible: list[bool] = []
    options = SnackbarOptions(
        duration_seconds=5,
        behavior=SnackbarBehavior.FLOATING,
        action=SnackbarAction(label="Undo", on_pressed=lambda: None),
        show_close_icon=True,
        on_visible=lambda: visible.append(True),
    )

    surface.show("Saved", options)

    assert "[5s] (floating) Saved [Undo] [x]" in loguru_caplog.text
    assert surface.current == "Saved"
    assert surface.shown == ["Saved"]
    assert visible == [True]

    surface.clear()
    assert surface.current is None


def test_console_surface_logs_and_raises(
    loguru_caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    surface = ConsoleNotificationSurface()

    def boom(*_: object) -> str:
        raise ValueError("console boom")

    monkeypatch.setattr("kibkit.infrastructure.notifier.console._render", boom)
    with pytest.raises(NotificationDeliveryError) as info:
        surface.show("text", SnackbarOptions())

    assert "console boom" in loguru_caplog.text
    assert info.value.context == {"error": "ValueError('console boom')"}
    assert isinstance(info.value.__cause__, ValueError)
    assert surface.current is None
