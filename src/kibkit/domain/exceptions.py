from __future__ import annotations

import traceback
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from traceback import StackSummary
from types import TracebackType
from typing import Any

from kibkit.errors import KibError

Trace = TracebackType | StackSummary | None


@dataclass(slots=True, kw_only=True)
class WrappedError(KibError):
    """Uniform wrapper for a failure caught at a boundary.

    Keeps the original error and the type it had before wrapping, so call
    sites can still tell what actually went wrong. Two instances compare
    equal when ``message``, ``error_kind`` and ``cause`` are equal; the
    captured ``trace`` is ignored. Fields cannot be reassigned.

    Example::

        try:
            await load_user()
        except Exception as exc:
            raise WrappedError(
                message="Failed to load user data",
                error_kind=type(exc),
                cause=exc,
                trace=exc.__traceback__,
            ) from exc
    """

    error_kind: type
    cause: object
    trace: Trace = field(compare=False)
    code: str | None = field(init=False, default="WRAPPED_ERROR")
    context: Mapping[str, Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Exception message must not be empty")

    def __hash__(self) -> int:
        # cause may be any object, hashable or not
        return hash((self.message, self.error_kind))

    @classmethod
    def wrap(cls, exc: BaseException, message: str | None = None) -> WrappedError:
        """Build a wrapper for *exc* caught in an ``except`` block."""
        trace: Trace = exc.__traceback__
        if trace is None:
            trace = StackSummary.from_list(traceback.extract_stack()[:-1])
        return cls(
            message=message or str(exc) or type(exc).__name__,
            error_kind=type(exc),
            cause=exc,
            trace=trace,
        )


@dataclass(slots=True, eq=False)
class UnauthorizedError(KibError):
    """Authentication failed or authorization was denied.

    Invalid credentials, expired tokens, insufficient permissions.
    """

    code: str | None = field(init=False, default="UNAUTHORIZED")


@dataclass(slots=True, eq=False)
class NotFoundError(KibError):
    """A requested resource, entity or file does not exist."""

    code: str | None = field(init=False, default="NOT_FOUND")


@dataclass(slots=True, eq=False)
class NetworkError(KibError):
    """A request failed, timed out or could not connect.

    ``status_code`` is only set when the transport produced one.
    """

    url: str
    status_code: int | None = field(default=None, kw_only=True)
    code: str | None = field(init=False, default="NETWORK_ERROR")


@dataclass(slots=True, eq=False)
class ValidationError(KibError):
    """Input data failed validation.

    ``field_errors`` maps a field name to its error text.
    """

    field_errors: Mapping[str, str] | None = field(default=None, kw_only=True)
    code: str | None = field(init=False, default="VALIDATION_FAILED")


@dataclass(slots=True, eq=False)
class ConfigurationError(KibError):
    """Required configuration or setup is missing or invalid."""

    code: str | None = field(init=False, default="CONFIGURATION_ERROR")


@dataclass(slots=True, eq=False)
class InvalidActionError(KibError):
    """An action was requested that the current state does not allow.

    Example::

        if player.state is not PlayerState.PLAYING:
            raise InvalidActionError(
                "Cannot pause when not playing",
                current_state=player.state.value,
                valid_actions=["play", "stop"],
            )
    """

    current_state: str | None = field(default=None, kw_only=True)
    valid_actions: Sequence[str] | None = field(default=None, kw_only=True)
    code: str | None = field(init=False, default="INVALID_ACTION")

    def __str__(self) -> str:
        parts = [self.message]
        if self.current_state is not None:
            parts.append(f" (Current state: {self.current_state})")
        if self.valid_actions:
            parts.append(f" Valid actions: {', '.join(self.valid_actions)}")
        return "".join(parts)
