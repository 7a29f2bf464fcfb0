from datetime import datetime

from carbooking.utils.filters import fmt_iso_local


def test_naive_datetime_is_treated_as_utc():
    assert fmt_iso_local(datetime(2025, 3, 1, 9, 30), "Pacific/Auckland") == "01/03/2025 22:30"


def test_iso_string_with_z_suffix():
    assert fmt_iso_local("2025-03-01T09:30:00Z") == "01/03/2025 09:30"


def test_date_only_string():
    assert fmt_iso_local("2025-03-01") == "01/03/2025"


def test_unknown_timezone_falls_back_to_utc():
    assert fmt_iso_local(datetime(2025, 3, 1, 9, 30), "Mars/Olympus") == "01/03/2025 09:30"


def test_unparseable_and_empty_values():
    assert fmt_iso_local("next tuesday") == "next tuesday"
    assert fmt_iso_local(None) == ""
    assert fmt_iso_local("  ") == ""
