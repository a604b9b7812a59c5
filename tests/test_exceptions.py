import traceback
from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from kibkit.domain.exceptions import (
    ConfigurationError,
    InvalidActionError,
    NetworkError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    WrappedError,
)
from kibkit.errors import KibError


def _wrapped(message: str = "Test error message", **kwargs: object) -> WrappedError:
    error = kwargs.pop("error", ValueError("Original error"))
    return WrappedError(
        message=message,
        error_kind=type(error),
        cause=error,
        trace=kwargs.pop("trace", traceback.extract_stack()),
    )


def test_wrapped_error_keeps_fields() -> None:
    error = ValueError("Original error")
    trace = traceback.extract_stack()
    exc = WrappedError(
        message="Test error message", error_kind=ValueError, cause=error, trace=trace
    )

    assert exc.message == "Test error message"
    assert exc.error_kind is ValueError
    assert exc.cause is error
    assert exc.trace is trace
    assert exc.code == "WRAPPED_ERROR"


def test_wrapped_error_str_is_message() -> None:
    assert str(_wrapped("Test message")) == "Test message"


def test_wrapped_error_rejects_empty_message() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        _wrapped("")


def test_wrapped_error_equality_ignores_trace() -> None:
    error = KeyError("id")
    first = WrappedError(message="m", error_kind=KeyError, cause=error, trace=None)
    second = WrappedError(
        message="m", error_kind=KeyError, cause=error, trace=traceback.extract_stack()
    )

    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize(
    "changes",
    [
        {"message": "other"},
        {"error_kind": LookupError},
        {"cause": KeyError("other")},
    ],
)
def test_wrapped_error_inequality(changes: dict[str, object]) -> None:
    error = KeyError("id")
    base = {"message": "m", "error_kind": KeyError, "cause": error, "trace": None}

    assert WrappedError(**base) != WrappedError(**{**base, **changes})


def test_wrapped_error_is_immutable() -> None:
    exc = _wrapped()
    with pytest.raises(AttributeError):
        exc.message = "changed"  # type: ignore[misc]


def test_wrapped_error_wrap_from_caught_exception() -> None:
    try:
        {}["missing"]
    except KeyError as exc:
        wrapped = WrappedError.wrap(exc, "Lookup failed")

    assert wrapped.message == "Lookup failed"
    assert wrapped.error_kind is KeyError
    assert isinstance(wrapped.cause, KeyError)
    assert wrapped.trace is wrapped.cause.__traceback__


def test_wrapped_error_wrap_defaults_message_and_trace() -> None:
    exc = RuntimeError()
    wrapped = WrappedError.wrap(exc)

    assert wrapped.message == "RuntimeError"
    assert isinstance(wrapped.trace, traceback.StackSummary)


def test_wrapped_error_can_be_raised_and_caught() -> None:
    with pytest.raises(WrappedError) as info:
        raise _wrapped("boom")
    assert isinstance(info.value, KibError)


def test_unauthorized_and_not_found() -> None:
    assert UnauthorizedError("Invalid credentials").message == "Invalid credentials"
    assert NotFoundError("User not found").message == "User not found"
    assert str(NotFoundError("User not found")) == "User not found"
    assert UnauthorizedError("x").code == "UNAUTHORIZED"


def test_network_error_without_status_code() -> None:
    exc = NetworkError("Connection failed", "https://api.example.com")
    assert exc.message == "Connection failed"
    assert exc.url == "https://api.example.com"
    assert exc.status_code is None


def test_network_error_with_status_code() -> None:
    exc = NetworkError("Server error", "https://api.example.com", status_code=500)
    assert exc.status_code == 500
    assert exc.code == "NETWORK_ERROR"


def test_validation_error_field_errors() -> None:
    assert ValidationError("Validation failed").field_errors is None

    field_errors = {
        "email": "Invalid email format",
        "password": "Password too short",
    }
    exc = ValidationError("Form validation failed", field_errors=field_errors)
    assert exc.message == "Form validation failed"
    assert exc.field_errors == field_errors


def test_configuration_error() -> None:
    exc = ConfigurationError("API key not configured")
    assert exc.message == "API key not configured"


def test_specialized_kinds_skip_message_validation() -> None:
    assert UnauthorizedError("").message == ""


def test_specialized_kinds_compare_by_identity() -> None:
    first = NotFoundError("User not found")
    second = NotFoundError("User not found")

    assert first != second
    assert first == first


def test_invalid_action_defaults() -> None:
    exc = InvalidActionError("Cannot process at this time")
    assert exc.current_state is None
    assert exc.valid_actions is None
    assert str(exc) == "Cannot process at this time"


def test_invalid_action_str_with_state_and_actions() -> None:
    exc = InvalidActionError(
        "Cannot pause", current_state="stopped", valid_actions=["play", "stop"]
    )
    assert exc.valid_actions == ["play", "stop"]
    assert str(exc) == "Cannot pause (Current state: stopped) Valid actions: play, stop"


def test_invalid_action_str_with_partial_information() -> None:
    only_state = InvalidActionError("Cannot pause", current_state="stopped")
    assert str(only_state) == "Cannot pause (Current state: stopped)"

    only_actions = InvalidActionError("Cannot pause", valid_actions=["play", "stop"])
    assert str(only_actions) == "Cannot pause Valid actions: play, stop"


def test_invalid_action_str_ignores_empty_actions() -> None:
    exc = InvalidActionError("Cannot pause", current_state="", valid_actions=[])
    assert str(exc) == "Cannot pause (Current state: )"


def test_kib_error_str_and_context() -> None:
    err = KibError("msg", code="X", context={"foo": "bar"})
    assert str(err) == "msg"
    assert err.code == "X" and err.context == {"foo": "bar"}


def test_wrapped_error_hash_accepts_unhashable_cause() -> None:
    first = WrappedError(message="m", error_kind=dict, cause={"a": 1}, trace=None)
    second = WrappedError(message="m", error_kind=dict, cause={"a": 1}, trace=None)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    "error",
    [
        NotFoundError("User not found"),
        NetworkError("Connection failed", "https://api.example.com"),
    ],
)
def test_specialized_kinds_are_immutable(error: KibError) -> None:
    with pytest.raises(AttributeError):
        error.message = "changed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del error.message
    assert error.message != "changed"


@contextmanager
def _open_session() -> Iterator[None]:
    yield


def test_error_passes_through_contextmanager() -> None:
    with pytest.raises(WrappedError) as info:
        with _open_session():
            raise _wrapped("boom")

    assert info.value.__traceback__ is not None
    assert info.value.message == "boom"


def test_error_accepts_notes_and_chaining() -> None:
    cause = KeyError("id")
    with pytest.raises(NotFoundError) as info:
        try:
            raise cause
        except KeyError as exc:
            err = NotFoundError("User not found")
            err.add_note("while loading profile")
            raise err from exc

    assert info.value.__cause__ is cause
    assert info.value.__notes__ == ["while loading profile"]
