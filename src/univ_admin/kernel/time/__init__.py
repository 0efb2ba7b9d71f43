"""Kernel time – Clock port + implementations."""
from univ_admin.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    add_days,
    is_after,
    is_before,
    now_iso,
    start_of_utc_day,
    utc_now,
)

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "add_days",
    "is_after",
    "is_before",
    "now_iso",
    "start_of_utc_day",
    "utc_now",
]
