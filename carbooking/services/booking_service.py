import logging
import random
from datetime import datetime, timezone
from typing import Optional

from carbooking.exceptions import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    CancellationWindowExpiredError,
    EmailNotConfiguredError,
    InvalidPayloadError,
    PaymentNotCompletedError,
)
from carbooking.models.base import _now
from carbooking.models.booking import Booking
from carbooking.services import paypal_service
from carbooking.services.notification_service import NotificationService, mail_configured
from carbooking.utils.constants import (
    CANCELLATION_WINDOW_HOURS,
    BookingStatus,
    NotificationStatus,
    PaymentStatus,
)
from carbooking.utils.wire import apply_wire_fields, document_to_wire

logger = logging.getLogger(__name__)

# server-owned; ignored when present in a client payload
PROTECTED_BOOKING_FIELDS = (
    "_id",
    "bookingReference",
    "status",
    "paymentStatus",
    "paypalOrderId",
    "paypalCaptureId",
    "notificationStatus",
    "createdAt",
)


def generate_booking_reference() -> str:
    """BK- plus six digits; uniqueness is left to the unique index."""
    return f"BK-{random.randint(100000, 999999)}"


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def hours_since(created_at: datetime, now: datetime) -> float:
    return (_naive_utc(now) - _naive_utc(created_at)).total_seconds() / 3600


def ensure_cancellable(created_at: datetime, status: str, now: datetime) -> None:
    """
    Raise unless the booking may be cancelled at `now`.
    The window is inclusive: exactly 24h after creation is still allowed.
    """
    if hours_since(created_at, now) > CANCELLATION_WINDOW_HOURS:
        raise CancellationWindowExpiredError()
    if status == BookingStatus.CANCELLED:
        raise BookingAlreadyCancelledError()


class BookingService:
    """Create, look up, cancel and pay for bookings."""

    @staticmethod
    def _new_booking(data) -> Booking:
        if not isinstance(data, dict):
            raise InvalidPayloadError("Booking data must be a JSON object")
        booking = apply_wire_fields(Booking(), data, exclude=PROTECTED_BOOKING_FIELDS)
        booking.booking_reference = generate_booking_reference()
        return booking

    @staticmethod
    def _record_notification(booking: Booking, outcome: str) -> None:
        booking.notification_status = outcome
        booking.save()
        if outcome == NotificationStatus.FAILED:
            logger.warning("Booking %s saved but notification failed", booking.booking_reference)

    @staticmethod
    def create_booking(data) -> Booking:
        """
        Persist then notify. SMTP must be configured up front so no booking is
        stored that can never be confirmed by e-mail.
        """
        if not isinstance(data, dict):
            raise InvalidPayloadError("Booking data must be a JSON object")
        if not mail_configured():
            raise EmailNotConfiguredError()

        booking = BookingService._new_booking(data)
        booking.save()
        logger.info("Created booking %s", booking.booking_reference)

        outcome = NotificationService.send_booking_confirmation(booking)
        BookingService._record_notification(booking, outcome)
        return booking

    @staticmethod
    def _find(reference: str) -> Booking:
        booking = Booking.objects(booking_reference=reference).first()
        if booking is None:
            raise BookingNotFoundError()
        return booking

    @staticmethod
    def get_booking(reference: str) -> dict:
        return document_to_wire(BookingService._find(reference))

    @staticmethod
    def cancel_booking(reference: str, now: Optional[datetime] = None) -> Booking:
        booking = BookingService._find(reference)
        ensure_cancellable(booking.created_at, booking.status, now or _now())

        booking.status = BookingStatus.CANCELLED
        booking.save()
        logger.info("Cancelled booking %s", reference)

        outcome = NotificationService.send_cancellation(booking)
        BookingService._record_notification(booking, outcome)
        return booking

    @staticmethod
    def capture_and_book(order_id: str, booking_data) -> Booking:
        """
        Capture a PayPal order and store the paid booking. Any capture status
        other than COMPLETED stores nothing. Retried captures are not deduplicated.
        """
        if not order_id:
            raise InvalidPayloadError("orderID is required")
        if booking_data is None:
            booking_data = {}

        capture = paypal_service.capture_order(order_id)
        status = capture.get("status")
        if status != "COMPLETED":
            logger.warning("PayPal order %s not completed (status=%s)", order_id, status)
            raise PaymentNotCompletedError()

        booking = BookingService._new_booking(booking_data)
        booking.payment_status = PaymentStatus.PAID
        booking.paypal_order_id = order_id
        booking.paypal_capture_id = paypal_service.capture_id_from(capture)
        booking.save()
        logger.info("Created paid booking %s for order %s", booking.booking_reference, order_id)

        outcome = NotificationService.send_booking_confirmation(booking, paid=True)
        BookingService._record_notification(booking, outcome)
        return booking
