import re

from carbooking.services import booking_service
from carbooking.services.booking_service import generate_booking_reference

PATTERN = re.compile(r"^BK-\d{6}$")


def test_reference_format_and_range():
    for _ in range(200):
        ref = generate_booking_reference()
        assert PATTERN.match(ref), ref
        assert 100000 <= int(ref[3:]) <= 999999


def test_reference_bounds(monkeypatch):
    monkeypatch.setattr(booking_service.random, "randint", lambda a, b: a)
    assert generate_booking_reference() == "BK-100000"
    monkeypatch.setattr(booking_service.random, "randint", lambda a, b: b)
    assert generate_booking_reference() == "BK-999999"
