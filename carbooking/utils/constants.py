# carbooking/utils/constants.py

"""
Global constants for car kinds, booking statuses and allowed enum values.
These constants are imported by both models and services.
"""


class CarType:
    TRANSFER = "transfer"
    RENTAL = "rental"


class BookingStatus:
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PaymentStatus:
    UNPAID = "unpaid"
    PAID = "paid"
    REFUNDED = "refunded"


class NotificationStatus:
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


CAR_TYPES = (CarType.TRANSFER, CarType.RENTAL)
TRANSMISSIONS = ("Automatic", "Manual")
FUEL_TYPES = ("Petrol", "Diesel", "Electric", "Hybrid")
BOOKING_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED)
PAYMENT_STATUSES = (PaymentStatus.UNPAID, PaymentStatus.PAID, PaymentStatus.REFUNDED)
NOTIFICATION_STATUSES = (
    NotificationStatus.PENDING,
    NotificationStatus.SENT,
    NotificationStatus.FAILED,
    NotificationStatus.SKIPPED,
)

# --- Misc ---
PLACEHOLDER_IMAGE = "/placeholder-car.png"
DEFAULT_CURRENCY = "USD"
DEFAULT_CANCELLATION_POLICY = "Free Cancellation 24h"
CANCELLATION_WINDOW_HOURS = 24
REQUIRED_CAR_FIELDS = ("name", "type", "carType", "price")
ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "webp", "gif"}
