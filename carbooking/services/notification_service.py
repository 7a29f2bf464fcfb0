"""
Booking e-mails.

Each event sends two messages, one to the admin inbox and one to the
passenger, in parallel. Sending happens after the booking is written; a
failed send is logged and reported as a status, never raised.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from flask import current_app, render_template
from flask_mail import Message

from carbooking.extensions import mail
from carbooking.models.base import _now
from carbooking.utils.constants import NotificationStatus

logger = logging.getLogger(__name__)


def mail_configured() -> bool:
    return bool(current_app.config.get("MAIL_CONFIGURED"))


def _send_in_context(app, msg: Message) -> None:
    with app.app_context():
        mail.send(msg)


class NotificationService:

    @staticmethod
    def _dispatch(messages: list[Message]) -> str:
        if not messages:
            return NotificationStatus.SKIPPED
        app = current_app._get_current_object()
        failed = 0
        with ThreadPoolExecutor(max_workers=len(messages)) as pool:
            futures = {pool.submit(_send_in_context, app, m): m for m in messages}
            for future, msg in futures.items():
                try:
                    future.result()
                except Exception:
                    failed += 1
                    logger.exception("Failed to send '%s' to %s", msg.subject, msg.recipients)
        if failed:
            return NotificationStatus.FAILED
        logger.info("Sent %d notification(s)", len(messages))
        return NotificationStatus.SENT

    @staticmethod
    def _pair(booking, template: str, admin_subject: str, customer_subject: str, **context) -> list[Message]:
        html = render_template(
            template,
            booking=booking,
            year=_now().year,
            display_tz=current_app.config.get("DISPLAY_TIMEZONE", "UTC"),
            **context,
        )
        messages = []
        admin = current_app.config.get("ADMIN_EMAIL")
        if admin:
            messages.append(Message(admin_subject, recipients=[admin], html=html))
        if booking.email:
            messages.append(Message(customer_subject, recipients=[booking.email], html=html))
        return messages

    @staticmethod
    def send_booking_confirmation(booking, paid: bool = False) -> str:
        if not mail_configured():
            logger.warning("SMTP not configured; skipping confirmation for %s", booking.booking_reference)
            return NotificationStatus.SKIPPED
        ref = booking.booking_reference
        if paid:
            admin_subject = f"NEW PAID BOOKING: {booking.passenger_name} - {ref}"
            customer_subject = f"Your Booking Confirmation (Paid) - {ref}"
        else:
            admin_subject = f"NEW BOOKING: {booking.passenger_name} - {ref}"
            customer_subject = f"Your Booking Confirmation - {ref}"
        messages = NotificationService._pair(
            booking, "email/booking_confirmation.html", admin_subject, customer_subject, paid=paid
        )
        return NotificationService._dispatch(messages)

    @staticmethod
    def send_cancellation(booking) -> str:
        if not mail_configured():
            logger.warning("SMTP not configured; skipping cancellation mail for %s", booking.booking_reference)
            return NotificationStatus.SKIPPED
        ref = booking.booking_reference
        messages = NotificationService._pair(
            booking,
            "email/booking_cancelled.html",
            f"BOOKING CANCELLED: {booking.passenger_name} - {ref}",
            f"Booking Cancellation Confirmation - {ref}",
        )
        return NotificationService._dispatch(messages)
