from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kibkit.errors import KibError


@dataclass(slots=True, kw_only=True, eq=False)
class InfraError(KibError):
    """Base exception for infrastructure layer."""


@dataclass(slots=True, kw_only=True, eq=False)
class NotificationDeliveryError(InfraError):
    message: str
    context: dict[str, Any] | None = None
    code: str = field(init=False, default="INFRA_NOTIFICATION_FAILED")
