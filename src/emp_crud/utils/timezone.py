# src/emp_crud/utils/timezone.py
from __future__ import annotations

import logging
from datetime import datetime

import pytz

from src.emp_crud.config import settings

# -----------------------------------------------------------------------------
# Configure local timezone with fallback
# -----------------------------------------------------------------------------
try:
    LOCAL_TZ = pytz.timezone(settings.TIMEZONE)
except pytz.UnknownTimeZoneError as exc:
    logging.getLogger(__name__).warning(
        "Invalid TIMEZONE '%s' in settings; falling back to Asia/Shanghai. Error: %s",
        settings.TIMEZONE,
        exc
    )
    LOCAL_TZ = pytz.timezone("Asia/Shanghai")

# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------
def now_local() -> datetime:
    """
    Return the current time as a timezone-aware datetime in the configured local timezone.
    """
    return datetime.now(LOCAL_TZ) # 2026-10-19 13:40:15+08:00


def now_naive() -> datetime:
    """
    Local wall-clock time without tzinfo; emp.create_time / emp.update_time
    are stored as naive DATETIME columns.
    """
    dt = now_local()
    return dt.replace(tzinfo=None) if getattr(dt, "tzinfo", None) else dt
