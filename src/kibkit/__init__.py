"""Helpers for asynchronous UI code: typed errors, results and tracked state."""

from kibkit.application.scoped_provider import (
    ScopedProvider,
    with_provider,
    with_providers,
)
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
from kibkit.result import Failure, Result, Success, failure, success, try_result
from kibkit.ui import (
    BuildContext,
    StatefulComponent,
    StatelessComponent,
    StateManagementMixin,
    post_frame,
    show_message,
)

__all__ = [
    "BuildContext",
    "ConfigurationError",
    "Failure",
    "InvalidActionError",
    "KibError",
    "NetworkError",
    "NotFoundError",
    "Result",
    "ScopedProvider",
    "StateManagementMixin",
    "StatefulComponent",
    "StatelessComponent",
    "Success",
    "UnauthorizedError",
    "ValidationError",
    "WrappedError",
    "failure",
    "post_frame",
    "show_message",
    "success",
    "try_result",
    "with_provider",
    "with_providers",
]
