"""
launch_plan.py

State of the scheduled launcher plus the two text parsers that feed it.

* `LaunchPlan` is created empty at start-up and mutated in place, only on
  the UI thread, by `launcher.update()`.
* `parse_watch_time()` / `parse_start_offset()` raise
  `InputValidationError` with a user-facing message; callers keep the
  previous value when that happens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

# ── Messages ────────────────────────────────────────────────────────────────
WATCH_TIME_ERROR   = "Invalid watch time, example: 13:10"
START_OFFSET_ERROR = "Invalid video begin second, example: 10"

# ── Regex helpers ───────────────────────────────────────────────────────────
_HM_RE     = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")
_OFFSET_RE = re.compile(r"^\s*\+?(\d+)\s*$")


class InputValidationError(ValueError):
    """Malformed text in one of the form fields."""


# ── Parsers ─────────────────────────────────────────────────────────────────
def parse_watch_time(text: str) -> Tuple[int, int]:
    """`"HH:MM"` → (hour, minute), hour 0-23 and minute 0-59."""
    m = _HM_RE.match(text or "")
    if not m:
        raise InputValidationError(WATCH_TIME_ERROR)
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InputValidationError(WATCH_TIME_ERROR)
    return hour, minute


def parse_start_offset(text: str) -> int:
    """Decimal string → non-negative whole seconds."""
    m = _OFFSET_RE.match(text or "")
    if not m:
        raise InputValidationError(START_OFFSET_ERROR)
    return int(m.group(1))


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass
class LaunchPlan:
    target_time: Optional[Tuple[int, int]] = None
    start_offset_seconds: int = 0
    media_path: str = ""
    armed: bool = False

    # Shown on the form's info line (validation errors, "please wait")
    info: str = ""

    # Probed clip length in seconds, 0.0 when unknown
    media_length: float = 0.0

    def as_dict(self) -> dict:
        """JSON-friendly snapshot (used by the web remote)."""
        return {
            "target_time": list(self.target_time) if self.target_time else None,
            "start_offset_seconds": self.start_offset_seconds,
            "media_path": self.media_path,
            "media_length": self.media_length,
            "armed": self.armed,
            "info": self.info,
        }
