from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from kibkit.result import Failure, Result, Success
from kibkit.ui.component import StatefulComponent

A = TypeVar("A")


class StateManagementMixin(StatefulComponent):
    """Loading, error and status bookkeeping for a stateful component.

    Every setter goes through :meth:`set_state`, so changes made after the
    component was unmounted are dropped without raising. That makes it safe
    for an operation to finish after its component is gone.
    """

    _is_loading: bool = False
    _last_error: BaseException | None = None
    _status_message: str = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> BaseException | None:
        return self._last_error

    @property
    def error(self) -> BaseException | None:
        return self._last_error

    @property
    def status_message(self) -> str:
        return self._status_message

    def set_loading(self, value: bool) -> None:
        def apply() -> None:
            self._is_loading = value

        self.set_state(apply)

    def set_error(self, error: BaseException | None) -> None:
        def apply() -> None:
            self._last_error = error

        self.set_state(apply)

    def set_status_message(self, message: str) -> None:
        def apply() -> None:
            self._status_message = message

        self.set_state(apply)

    def update_state(
        self,
        *,
        is_loading: bool | None = None,
        error: BaseException | None = None,
        status_message: str | None = None,
    ) -> None:
        """Apply the given fields in a single re-render.

        Omitted fields are left alone. ``error`` and ``status_message``
        cannot be cleared here; use :meth:`reset_all_states` for that.
        """

        def apply() -> None:
            if is_loading is not None:
                self._is_loading = is_loading
            if error is not None:
                self._last_error = error
            if status_message:
                self._status_message = status_message

        self.set_state(apply)

    def reset_all_states(self) -> None:
        def apply() -> None:
            self._is_loading = False
            self._last_error = None
            self._status_message = ""

        self.set_state(apply)

    def start_loading(self) -> None:
        def apply() -> None:
            self._is_loading = True
            self._last_error = None

        self.set_state(apply)

    async def with_operation_tracking(
        self, operation: Callable[[], Awaitable[A]]
    ) -> Result[A, Exception]:
        """Await *operation* while keeping loading and error state current.

        Returns ``Success`` with the operation's value, or ``Failure`` with
        whatever it raised; the exception is recorded in :attr:`last_error`
        and logged, never re-raised. Loading is switched off on every path.
        """
        try:
            self.start_loading()
            value = await operation()
            return Success(value)
        except Exception as e:
            self.set_error(e)
            self.log_error("Operation failed", e)
            return Failure(e)
        finally:
            self.set_loading(False)
