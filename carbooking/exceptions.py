"""
Custom exception classes for the car booking backend.

Services raise these; the error handlers registered in `create_app` turn them
into `{"success": false, "message": ...}` envelopes with the matching status.
"""


class CarBookingError(Exception):
    """Base class; carries a default message and an HTTP status."""

    status_code = 500
    default_message = "Error: request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---- not found (404) ----
class CarNotFoundError(CarBookingError):
    """Raised when a car ID cannot be found in the inventory."""

    status_code = 404
    default_message = "Car not found"


class DomainNotFoundError(CarBookingError):
    """Raised when a domain ID cannot be found."""

    status_code = 404
    default_message = "Domain not found"


class BookingNotFoundError(CarBookingError):
    """Raised when no booking carries the requested reference."""

    status_code = 404
    default_message = "Booking not found"


# ---- client errors (400) ----
class InvalidPayloadError(CarBookingError):
    """Raised for missing required fields or a malformed request body."""

    status_code = 400
    default_message = "Invalid request payload"


class DuplicateDomainError(CarBookingError):
    status_code = 400
    default_message = "Domain name already exists"


class CatalogNotEmptyError(CarBookingError):
    """Raised when seeding is requested while cars already exist."""

    status_code = 400
    default_message = "Database already has cars"


class BookingNotCancellableError(CarBookingError):
    status_code = 400
    default_message = "Booking cannot be cancelled"


class CancellationWindowExpiredError(BookingNotCancellableError):
    default_message = "Cancellation is only allowed within 24 hours of booking creation."


class BookingAlreadyCancelledError(BookingNotCancellableError):
    default_message = "Booking is already cancelled"


class PaymentNotCompletedError(CarBookingError):
    """Raised when PayPal reports any capture status other than COMPLETED."""

    status_code = 400
    default_message = "Payment not completed"


# ---- server / upstream errors (500) ----
class EmailNotConfiguredError(CarBookingError):
    default_message = "Email credentials are not configured"


class PaymentProviderError(CarBookingError):
    """Raised when PayPal rejects a call or cannot be reached."""

    default_message = "PayPal API Error"
