"""Domain primitives that enforce validity at creation time."""

import secrets
import string
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self

UNLIMITED_LABEL = "No limit"

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


@dataclass(frozen=True, order=True)
class EventId:
    """Unique, stable integer identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value.strip()))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Identifier of a user as issued by the account collaborator."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Positive seat count, or unlimited when value is None."""

    value: int | None

    def __post_init__(self) -> None:
        if self.value is not None and self.value < 1:
            raise ValueError("Capacity must be a positive integer")

    @classmethod
    def unlimited(cls) -> Self:
        return cls(value=None)

    @property
    def is_unlimited(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return UNLIMITED_LABEL if self.value is None else str(self.value)


@dataclass(frozen=True)
class RegistrationWindow:
    """Inclusive calendar-day window during which registration is open."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Registration window cannot end before it starts")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class Ticket:
    """Opaque registration receipt token."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Ticket cannot be empty")

    @classmethod
    def generate(cls, issued_at: datetime) -> Self:
        """Issue a token shaped like ``TCK-<base36 millis>-<6 random chars>``."""
        millis = int(issued_at.timestamp() * 1000)
        suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
        return cls(value=f"TCK-{_to_base36(millis)}-{suffix}".upper())

    def __str__(self) -> str:
        return self.value
