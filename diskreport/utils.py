from __future__ import annotations
import os
import sys
import time
from typing import Optional

BINARY_UNITS = "KMGTPE"

MINUTE = 60.0
HOUR = 60 * MINUTE
DAY_HOURS = 24
MONTH_HOURS = 30 * DAY_HOURS
YEAR_HOURS = 365 * DAY_HOURS

def format_bytes(num: int) -> str:
    """Render *num* bytes with binary units: ``999 B``, ``976.6 KiB``, ``1.0 GiB``."""
    if num < 1024:
        return f"{num} B"
    div, exp = 1024, 0
    n = num // 1024
    while n >= 1024 and exp < len(BINARY_UNITS) - 1:
        div *= 1024
        exp += 1
        n //= 1024
    return f"{num / div:.1f} {BINARY_UNITS[exp]}iB"

def format_age(ts: float, now: Optional[float] = None) -> str:
    """Describe how long ago *ts* (epoch seconds) was, e.g. ``3 days ago``.

    Months are 30 days and years 365 days; nothing is calendar aware.
    A zero timestamp means the time is not known.
    """
    if not ts:
        return "unknown"
    if now is None:
        now = time.time()
    secs = now - ts
    if secs < MINUTE:
        return "just now"
    if secs < HOUR:
        return f"{secs / MINUTE:.0f} minutes ago"
    hours = secs / HOUR
    if hours < DAY_HOURS:
        return f"{hours:.0f} hours ago"
    if hours < MONTH_HOURS:
        return f"{hours / DAY_HOURS:.0f} days ago"
    if hours < YEAR_HOURS:
        return f"{hours / MONTH_HOURS:.0f} months ago"
    return f"{hours / YEAR_HOURS:.0f} years ago"

def printable(text: str) -> str:
    """Swap undecodable file name bytes for U+FFFD so *text* always encodes."""
    return os.fsencode(text).decode(sys.getfilesystemencoding(), "replace")
