from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Brightness(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class TextStyle(ConfiguredBaseModel):
    size: float
    weight: int = 400
    color: str | None = None

    def copy_with(self, **changes: object) -> TextStyle:
        return self.model_copy(update=changes)


class ColorScheme(ConfiguredBaseModel):
    primary: str
    secondary: str
    surface: str
    error: str
    on_primary: str
    on_surface: str


class TextTheme(ConfiguredBaseModel):
    headline_medium: TextStyle = TextStyle(size=28)
    title_large: TextStyle = TextStyle(size=22, weight=500)
    body_medium: TextStyle = TextStyle(size=14)


class ThemeData(ConfiguredBaseModel):
    """Theme values a component reads while building."""

    brightness: Brightness
    color_scheme: ColorScheme
    text_theme: TextTheme = TextTheme()

    @classmethod
    def light(cls) -> ThemeData:
        return cls(
            brightness=Brightness.LIGHT,
            color_scheme=ColorScheme(
                primary="#6750A4",
                secondary="#625B71",
                surface="#FFFBFE",
                error="#B3261E",
                on_primary="#FFFFFF",
                on_surface="#1C1B1F",
            ),
        )

    @classmethod
    def dark(cls) -> ThemeData:
        return cls(
            brightness=Brightness.DARK,
            color_scheme=ColorScheme(
                primary="#D0BCFF",
                secondary="#CCC2DC",
                surface="#1C1B1F",
                error="#F2B8B5",
                on_primary="#381E72",
                on_surface="#E6E1E5",
            ),
        )

    @classmethod
    def named(cls, name: str) -> ThemeData:
        return cls.dark() if Brightness(name) is Brightness.DARK else cls.light()


class SnackbarBehavior(str, Enum):
    FIXED = "fixed"
    FLOATING = "floating"


class DismissDirection(str, Enum):
    DOWN = "down"
    UP = "up"
    HORIZONTAL = "horizontal"
    NONE = "none"


class SnackbarAction(ConfiguredBaseModel):
    label: str
    on_pressed: Callable[[], None]


class SnackbarOptions(ConfiguredBaseModel):
    """Display options for a single notification."""

    duration_seconds: int = Field(default=3, gt=0)
    background_color: str | None = None
    action: SnackbarAction | None = None
    behavior: SnackbarBehavior = SnackbarBehavior.FIXED
    on_visible: Callable[[], None] | None = None
    dismiss_direction: DismissDirection = DismissDirection.DOWN
    show_close_icon: bool | None = None
    close_icon_color: str | None = None


class UserProfile(ConfiguredBaseModel):
    id: str
    display_name: str
    email: str
