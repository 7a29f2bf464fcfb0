import pytest

from carbooking.exceptions import PaymentProviderError
from carbooking.models.booking import Booking
from carbooking.services import paypal_service
from carbooking.services.paypal_service import LIVE_API, SANDBOX_API, PayPalClient

BOOKING = {
    "bookingType": "rental",
    "fromLocation": "Christchurch",
    "date": "2025-04-10",
    "dropoffDate": "2025-04-14",
    "passengerName": "Sam Lee",
    "email": "sam@example.com",
    "currency": "USD",
    "totalPrice": 420,
}


def _completed(order_id):
    return {
        "id": order_id,
        "status": "COMPLETED",
        "purchase_units": [{"payments": {"captures": [{"id": "CAP-123"}]}}],
    }


def test_capture_completed_creates_paid_booking(client, monkeypatch, outbox):
    monkeypatch.setattr(paypal_service, "capture_order", _completed)
    r = client.post("/api/paypal/capture-order", json={"orderID": "ORDER-1", "bookingData": BOOKING})
    assert r.status_code == 200
    body = r.get_json()
    assert body["message"] == "Payment captured and booking created"

    booking = Booking.objects.get(booking_reference=body["bookingReference"])
    assert booking.payment_status == "paid"
    assert booking.paypal_order_id == "ORDER-1"
    assert booking.paypal_capture_id == "CAP-123"
    assert booking.booking_type == "rental"

    ref = body["bookingReference"]
    assert sorted(m.subject for m in outbox) == [
        f"NEW PAID BOOKING: Sam Lee - {ref}",
        f"Your Booking Confirmation (Paid) - {ref}",
    ]
    assert "Paid via PayPal" in outbox[0].html


def test_capture_denied_creates_nothing(client, monkeypatch):
    monkeypatch.setattr(paypal_service, "capture_order", lambda order_id: {"id": order_id, "status": "DENIED"})
    r = client.post("/api/paypal/capture-order", json={"orderID": "ORDER-2", "bookingData": BOOKING})
    assert r.status_code == 400
    assert r.get_json() == {"success": False, "message": "Payment not completed"}
    assert Booking.objects.count() == 0


def test_capture_without_smtp_still_books(client, app, monkeypatch, outbox):
    app.config["MAIL_CONFIGURED"] = False
    monkeypatch.setattr(paypal_service, "capture_order", _completed)
    r = client.post("/api/paypal/capture-order", json={"orderID": "ORDER-3", "bookingData": BOOKING})
    assert r.status_code == 200
    assert r.get_json()["notificationStatus"] == "skipped"
    assert Booking.objects.count() == 1
    assert outbox == []


def test_create_order_passes_provider_order_through(client, monkeypatch):
    calls = []

    def fake_create(amount, currency):
        calls.append((amount, currency))
        return {"id": "ORDER-9", "status": "CREATED"}

    monkeypatch.setattr(paypal_service, "create_order", fake_create)
    r = client.post("/api/paypal/create-order", json={"amount": "25.00"})
    assert r.status_code == 200
    assert r.get_json() == {"id": "ORDER-9", "status": "CREATED"}
    assert calls == [("25.00", "USD")]


def test_create_order_without_credentials_is_500(client):
    r = client.post("/api/paypal/create-order", json={"amount": "10.00", "currency": "EUR"})
    assert r.status_code == 500
    assert r.get_json() == {"error": "Missing PayPal credentials"}


def test_base_url_follows_mode():
    assert PayPalClient("id", "secret", "live").base_url == LIVE_API
    assert PayPalClient("id", "secret", "sandbox").base_url == SANDBOX_API
    assert PayPalClient("id", "secret", None).base_url == SANDBOX_API


def test_capture_id_missing_is_provider_error():
    with pytest.raises(PaymentProviderError):
        paypal_service.capture_id_from({"status": "COMPLETED", "purchase_units": []})
