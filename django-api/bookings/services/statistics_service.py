"""Statistics Service

Booking counts and amounts derived from the committed booking set at call
time. Nothing here is persisted or cached.
"""

from bookings.domain import BookingStats, Requester
from bookings.domain.errors import AdminRequiredError
from bookings.stores.interfaces import BookingStore


class StatisticsService:
    """Service for per-user and platform-wide booking statistics."""

    def __init__(self, bookings: BookingStore) -> None:
        self._bookings = bookings

    def user_stats(self, requester: Requester) -> BookingStats:
        """Counts over the requester's own bookings; amount is what they spent."""
        return self._bookings.stats(user_id=requester.user_id)

    def platform_stats(self, requester: Requester) -> BookingStats:
        """Counts over every booking; amount is confirmed revenue.

        Raises:
            AdminRequiredError: If the requester is not an administrator.
        """
        if not requester.is_admin:
            raise AdminRequiredError()
        return self._bookings.stats()
