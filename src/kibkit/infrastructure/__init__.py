from .error import InfraError, NotificationDeliveryError
from .notifier.console import ConsoleNotificationSurface

__all__ = [
    "ConsoleNotificationSurface",
    "InfraError",
    "NotificationDeliveryError",
]
