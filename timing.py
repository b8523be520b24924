# =========  timing.py  =========
"""
Wall-clock helpers.
Everything here works on *local* time at minute granularity; seconds
never take part in a trigger decision.
"""

import datetime
from typing import Optional, Tuple

HourMinute = Tuple[int, int]


def local_now() -> datetime.datetime:
    """Current local wall-clock time."""
    return datetime.datetime.now()


def same_minute(now: datetime.datetime, target: Optional[HourMinute]) -> bool:
    """True while *now* falls anywhere inside the (hour, minute) *target*."""
    if target is None:
        return False
    return (now.hour, now.minute) == target


def fmt_hm(target: Optional[HourMinute]) -> str:
    if target is None:
        return "--:--"
    h, m = target
    return f"{h:02d}:{m:02d}"


def fmt_hms(sec: float) -> str:
    sec = int(max(0, sec))
    m, s = divmod(sec, 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
