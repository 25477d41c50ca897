from bookings.services.booking_service import BookingService
from bookings.services.capacity_service import Availability, CapacityService
from bookings.services.statistics_service import StatisticsService

__all__ = ["BookingService", "CapacityService", "Availability", "StatisticsService"]
