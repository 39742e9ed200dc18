"""
Common utilities for the Carzone fleet application
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Current time in UTC as a naive datetime, the form the DateTime
    columns store.

    Returns:
        datetime: Current UTC datetime without tzinfo
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
