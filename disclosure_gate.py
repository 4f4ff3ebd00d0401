"""Admission check for the incident notice page."""

from datetime import datetime

from models import IncidentWindow


def is_open(window: IncidentWindow, now: datetime) -> bool:
    """
    Decide whether the notice may be served at ``now``.

    Both bounds are exclusive, so a request at exactly ``start`` or ``end`` is
    refused. A window whose start is not before its end is never open.

    Raises:
        ValueError: if ``now`` is a naive datetime
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")
    return window.start < now < window.end
