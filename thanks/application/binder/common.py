"""Shared binder types and value coercion."""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

C = TypeVar("C")

# Distinguishes "key absent" from an explicit null in request payloads
MISSING: Any = object()


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    name: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "reason": self.reason}


@dataclass
class BindResult(Generic[C]):
    """Outcome of binding a payload: a command, or the violations found."""

    command: Optional[C] = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def coerce_int(value: Any) -> Optional[int]:
    """Integer value of ``value``, or None if it is not integer-like.

    Accepts ints, integral floats and numeric strings. Booleans are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_str(value: Any) -> Optional[str]:
    """String value of ``value``; numbers are stringified, other types give None."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None
