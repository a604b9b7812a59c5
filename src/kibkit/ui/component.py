from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from loguru import logger

from kibkit.application.ports import NotificationSurface
from kibkit.application.scoped_provider import ScopedProvider
from kibkit.domain.exceptions import ConfigurationError
from kibkit.domain.models import ColorScheme, SnackbarOptions, TextTheme, ThemeData
from kibkit.result import Failure, Result
from kibkit.ui.snackbar import show_message

T = TypeVar("T")

RenderCallback = Callable[["StatefulComponent"], None]


def _require_tag(tag: str) -> str:
    if not tag:
        raise ValueError("Tag must not be empty")
    return tag


@dataclass(frozen=True, slots=True)
class BuildContext:
    """What the host hands to a component when it builds."""

    theme: ThemeData
    notifications: NotificationSurface
    scope: ScopedProvider | None = None
    snackbar_options: SnackbarOptions = field(default_factory=SnackbarOptions)

    def show_message(
        self,
        message: str,
        options: SnackbarOptions | None = None,
        **overrides: Any,
    ) -> Result[None, Exception]:
        if options is None:
            options = self.snackbar_options
        return show_message(self.notifications, message, options, **overrides)

    def resolve(self, type_: type[T]) -> T:
        if self.scope is None:
            raise ConfigurationError(
                f"No provider scope available to resolve {type_.__name__}"
            )
        return self.scope.resolve(type_)


class StatefulComponent(ABC):
    """Base class for stateful components with tagged logging and theme access.

    The host owns the lifecycle: it calls :meth:`mount` when the component
    joins the tree, :meth:`build` whenever it renders, and :meth:`unmount`
    when the component is destroyed. State changes go through
    :meth:`set_state`, which only applies them while the component is
    mounted and then asks the host to re-render via *on_render*.

    Example::

        class Counter(StatefulComponent):
            count = 0

            def increment(self) -> None:
                def apply() -> None:
                    self.count += 1

                self.set_state(apply)

            def build_with_theme(self, context: BuildContext) -> str:
                return f"{self.count}"
    """

    def __init__(self, tag: str, *, on_render: RenderCallback | None = None) -> None:
        self.tag = _require_tag(tag)
        self.on_render = on_render
        self._mounted = False
        self._context: BuildContext | None = None

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def context(self) -> BuildContext:
        if self._context is None:
            raise ConfigurationError(f"{self.tag} has not been built yet")
        return self._context

    @property
    def theme(self) -> ThemeData:
        return self.context.theme

    @property
    def color_scheme(self) -> ColorScheme:
        return self.theme.color_scheme

    @property
    def text_theme(self) -> TextTheme:
        return self.theme.text_theme

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        logger.info(f"initState: {self.tag}")
        self.init_state()

    def unmount(self) -> None:
        if not self._mounted:
            return
        self.dispose()
        logger.info(f"dispose: {self.tag}")
        self._mounted = False

    def init_state(self) -> None:
        """Hook called once right after mounting."""

    def dispose(self) -> None:
        """Hook called once right before unmounting."""

    def set_state(self, fn: Callable[[], object]) -> None:
        """Apply *fn* and request a re-render, only while mounted."""
        if not self._mounted:
            return
        fn()
        if self.on_render is not None:
            self.on_render(self)

    def build(self, context: BuildContext) -> Any:
        self._context = context
        return self.build_with_theme(context)

    @abstractmethod
    def build_with_theme(self, context: BuildContext) -> Any:
        """Render the component; theme accessors are ready by now."""

    def resolve(self, type_: type[T]) -> T:
        """Look up *type_* in the provider scope of the last build."""
        return self.context.resolve(type_)

    def inform_user(self, message: str) -> None:
        if not self._mounted:
            return
        result = self.context.show_message(message)
        if isinstance(result, Failure):
            self.log_error("Could not inform user", result.error)

    def log_debug(self, message: str) -> None:
        logger.debug(f"{self.tag}: {message}")

    def log_error(self, message: str, error: BaseException | None = None) -> None:
        kind = "" if error is None else f"[{type(error).__name__}]"
        logger.opt(exception=error).error(f"{self.tag} ERROR{kind}: {message}")


class StatelessComponent(ABC):
    """Base class for stateless components with tagged logging.

    The theme is unpacked and passed straight to :meth:`build_with_theme`.
    """

    def __init__(self, tag: str) -> None:
        self.tag = _require_tag(tag)

    def build(self, context: BuildContext) -> Any:
        logger.info(f"build: {self.tag}")
        theme = context.theme
        return self.build_with_theme(
            context, theme, theme.color_scheme, theme.text_theme
        )

    @abstractmethod
    def build_with_theme(
        self,
        context: BuildContext,
        theme: ThemeData,
        color_scheme: ColorScheme,
        text_theme: TextTheme,
    ) -> Any: ...

    def inform_user(
        self, context: BuildContext, message: str
    ) -> Result[None, Exception]:
        return context.show_message(message)

    def log_debug(self, message: str) -> None:
        logger.debug(f"{self.tag}: {message}")

    def log_error(self, message: str, error: BaseException | None = None) -> None:
        kind = "" if error is None else f"[{type(error).__name__}]"
        logger.opt(exception=error).error(f"{self.tag} ERROR{kind}: {message}")
