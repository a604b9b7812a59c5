"""Sample screen showing the exception taxonomy and tracked operations."""

from __future__ import annotations

import asyncio
from enum import Enum

from kibkit.domain.exceptions import NetworkError, WrappedError
from kibkit.domain.models import UserProfile
from kibkit.infrastructure.error_utils import wrap_exceptions
from kibkit.result import Failure, Result, Success
from kibkit.ui.component import BuildContext, RenderCallback
from kibkit.ui.state_management import StateManagementMixin

USERS_URL = "https://api.example.com/users"


class FailureMode(str, Enum):
    NONE = "none"
    NETWORK = "network"
    CRASH = "crash"


class UserDataScreen(StateManagementMixin):
    def __init__(
        self,
        failure_mode: FailureMode = FailureMode.NONE,
        delay: float = 0.0,
        *,
        on_render: RenderCallback | None = None,
    ) -> None:
        super().__init__("UserDataScreen", on_render=on_render)
        self.failure_mode = failure_mode
        self.delay = delay
        self.user: UserProfile | None = None

    @wrap_exceptions("Failed to fetch user data")
    async def _load_user(self) -> UserProfile:
        await asyncio.sleep(self.delay)
        match self.failure_mode:
            case FailureMode.NETWORK:
                raise NetworkError("Connection failed", USERS_URL, status_code=500)
            case FailureMode.CRASH:
                raise RuntimeError("user payload was truncated")
        return UserProfile(id="42", display_name="Ada", email="ada@example.com")

    async def fetch_user_data(self) -> Result[UserProfile, Exception]:
        result = await self.with_operation_tracking(self._load_user)
        match result:
            case Success(value=user):
                self.user = user
                self.set_status_message(f"Loaded {user.display_name}")
            case Failure(error=NetworkError() as e):
                self.set_status_message(
                    f"Network error: {e.message} (Status: {e.status_code})"
                )
            case Failure(error=WrappedError() as e):
                self.set_status_message(e.message)
                self.log_error(f"Error type: {e.error_kind.__name__}")
            case Failure(error=e):
                self.set_status_message(str(e))
        return result

    def build_with_theme(self, context: BuildContext) -> str:
        lines = ["User Data"]
        if self.is_loading:
            lines.append("  loading...")
        elif self.last_error is not None:
            lines.append(f"  error ({self.color_scheme.error}): {self.status_message}")
        elif self.status_message:
            lines.append(f"  {self.status_message}")
        return "\n".join(lines)
