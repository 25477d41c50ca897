"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID

MIN_SEATS_PER_BOOKING = 1
MAX_SEATS_PER_BOOKING = 2


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SeatCount:
    """Seats held by a single booking."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Seat count must be an integer")
        if not MIN_SEATS_PER_BOOKING <= self.value <= MAX_SEATS_PER_BOOKING:
            raise ValueError(
                f"Seat count must be between {MIN_SEATS_PER_BOOKING} "
                f"and {MAX_SEATS_PER_BOOKING}"
            )


@dataclass(frozen=True)
class Requester:
    """The authenticated identity behind a request."""

    user_id: int
    is_admin: bool = False
