"""Jinja filters and date formatting helpers."""
from datetime import datetime, timezone

import pytz


def fmt_iso_local(value, tz_name: str = "UTC") -> str:
    """
    Format a datetime (or ISO string) in the given display timezone.
    Supports:
      - datetime objects (naive values are treated as UTC)
      - 'YYYY-MM-DD'
      - 'YYYY-MM-DDTHH:MM:SS' with or without 'Z' / '+00:00'
    On parse error, returns the original value so an e-mail never shows a blank.
    """
    if value is None:
        return ""

    if isinstance(value, datetime):
        dt = value
    else:
        s = str(value).strip()
        if not s:
            return ""
        s_norm = s.replace("T", " ")
        if s_norm.endswith("Z"):
            s_norm = s_norm[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s_norm)
        except ValueError:
            try:
                return datetime.strptime(s_norm, "%Y-%m-%d").strftime("%d/%m/%Y")
            except ValueError:
                return s
        if ":" not in s_norm:
            return dt.strftime("%d/%m/%Y")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    local = dt.astimezone(tz)

    return local.strftime("%d/%m/%Y %H:%M")
