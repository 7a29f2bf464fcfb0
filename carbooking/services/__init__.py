from .analytics_service import AnalyticsService
from .booking_service import BookingService
from .car_service import CarService
from .domain_service import DomainService
from .notification_service import NotificationService
from .theme_service import ThemePreferenceStore, ThemeService

__all__ = [
    "AnalyticsService",
    "BookingService",
    "CarService",
    "DomainService",
    "NotificationService",
    "ThemePreferenceStore",
    "ThemeService",
]
