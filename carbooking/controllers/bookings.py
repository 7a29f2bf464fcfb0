from flask import Blueprint, request

from ..services.booking_service import BookingService
from ..utils.constants import NotificationStatus
from ..utils.wire import envelope

bp = Blueprint("bookings", __name__, url_prefix="/api/bookings")

CREATED_MESSAGES = {
    NotificationStatus.SENT: "Booking saved and emails sent",
    NotificationStatus.FAILED: "Booking saved but confirmation emails could not be sent",
    NotificationStatus.SKIPPED: "Booking saved; no confirmation emails were sent",
}


@bp.post("")
def create_booking():
    booking = BookingService.create_booking(request.get_json(silent=True))
    return envelope(
        message=CREATED_MESSAGES.get(booking.notification_status, "Booking saved"),
        status=201,
        bookingId=str(booking.id),
        bookingReference=booking.booking_reference,
        notificationStatus=booking.notification_status,
    )


@bp.get("/<reference>")
def get_booking(reference):
    return envelope(booking=BookingService.get_booking(reference))


@bp.patch("/<reference>")
def cancel_booking(reference):
    """Cancel within 24h of creation; the body is ignored."""
    booking = BookingService.cancel_booking(reference)
    return envelope(
        message="Booking cancelled successfully",
        notificationStatus=booking.notification_status,
    )
