import logging

from flask import Blueprint, jsonify, request

from ..exceptions import PaymentProviderError
from ..services import paypal_service
from ..services.booking_service import BookingService
from ..utils.constants import DEFAULT_CURRENCY
from ..utils.wire import envelope

logger = logging.getLogger(__name__)

bp = Blueprint("paypal", __name__, url_prefix="/api/paypal")


@bp.post("/create-order")
def create_order():
    """Returns PayPal's order object untouched; failures are `{error}` with 500."""
    body = request.get_json(silent=True) or {}
    try:
        order = paypal_service.create_order(body.get("amount"), body.get("currency") or DEFAULT_CURRENCY)
    except PaymentProviderError as e:
        logger.error("PayPal create order error: %s", e.message)
        return jsonify({"error": e.message}), 500
    return jsonify(order)


@bp.post("/capture-order")
def capture_order():
    body = request.get_json(silent=True) or {}
    booking = BookingService.capture_and_book(body.get("orderID"), body.get("bookingData"))
    return envelope(
        message="Payment captured and booking created",
        bookingId=str(booking.id),
        bookingReference=booking.booking_reference,
        notificationStatus=booking.notification_status,
    )
