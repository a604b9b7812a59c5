"""Component helpers layered on a host UI lifecycle."""

from .component import BuildContext, StatefulComponent, StatelessComponent
from .frame import post_frame
from .snackbar import show_message
from .state_management import StateManagementMixin

__all__ = [
    "BuildContext",
    "StateManagementMixin",
    "StatefulComponent",
    "StatelessComponent",
    "post_frame",
    "show_message",
]
