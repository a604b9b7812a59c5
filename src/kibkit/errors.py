from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field, fields
from typing import Any, Mapping


@dataclass(slots=True, eq=False)
class KibError(Exception):
    """Base error for all layers.

    Fields are write-once: they are set by ``__init__`` and cannot be
    reassigned afterwards. Exception machinery attributes
    (``__traceback__``, ``__cause__``, ``__context__``, ``__notes__``) stay
    writable so the error can travel through ``contextlib`` and ``raise``.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code for monitoring/alerts.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = field(default=None, kw_only=True)
    context: Mapping[str, Any] | None = field(default=None, kw_only=True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _field_names(type(self)) and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name in _field_names(type(self)):
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        object.__delattr__(self, name)

    def __str__(self) -> str:
        return self.message


def _field_names(cls: type) -> frozenset[str]:
    return frozenset(f.name for f in fields(cls))
