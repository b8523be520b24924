"""
launcher.py – the scheduled trigger

All state lives in a `LaunchPlan`; `update(plan, action)` applies exactly
one action dict to it and returns the follow-up effects for the caller to
execute (start/stop the tick timer, run the player, open the file dialog…).
Nothing in here touches pygame, threads or subprocesses.

States:  Idle ──start──▶ Armed ──matching tick──▶ Idle (+ launch)
"""

from __future__ import annotations

import logging
from typing import List

import timing
from launch_plan import (
    InputValidationError,
    LaunchPlan,
    parse_start_offset,
    parse_watch_time,
)

log = logging.getLogger(__name__)

Effect = dict

EFFECT_TYPES = frozenset({
    "subscribe_ticks",
    "unsubscribe_ticks",
    "launch",               # {"offset": int, "path": str}
    "open_file_dialog",
    "probe_media",          # {"path": str}
    "quit",
})


class ScheduledLauncher:
    """Operations on a `LaunchPlan`; every method returns a list of effects."""

    def __init__(self, plan: LaunchPlan):
        self.plan = plan

    # ── field edits ────────────────────────────────────────────────────
    def set_target_time(self, text: str) -> List[Effect]:
        try:
            self.plan.target_time = parse_watch_time(text)
        except InputValidationError as exc:
            self.plan.info = str(exc)
            log.debug("rejected watch time %r", text)
        else:
            self.plan.info = ""
        return []

    def set_start_offset(self, text: str) -> List[Effect]:
        try:
            self.plan.start_offset_seconds = parse_start_offset(text)
        except InputValidationError as exc:
            self.plan.info = str(exc)
            log.debug("rejected start offset %r", text)
        else:
            self.plan.info = ""
        return []

    def set_media_path(self, path: str | None) -> List[Effect]:
        if path is None:                    # dialog cancelled
            log.debug("file selection cancelled")
            return []
        self.plan.media_path = path
        self.plan.media_length = 0.0
        log.debug("media path %s", path)
        return [{"type": "probe_media", "path": path}] if path else []

    def set_media_length(self, path: str, seconds: float) -> List[Effect]:
        # ignore stale results for a file that is no longer selected
        if path == self.plan.media_path:
            self.plan.media_length = max(0.0, float(seconds))
        return []

    # ── arm / tick ─────────────────────────────────────────────────────
    def arm(self) -> List[Effect]:
        was_armed = self.plan.armed
        self.plan.armed = True
        self.plan.info = f"Please wait to {timing.fmt_hm(self.plan.target_time)}"
        if was_armed:
            return []
        log.info("armed for %s", timing.fmt_hm(self.plan.target_time))
        return [{"type": "subscribe_ticks"}]

    def on_tick(self, now) -> List[Effect]:
        if not self.plan.armed or not timing.same_minute(now, self.plan.target_time):
            return []

        # disarm first: the launch effect runs after this returns
        self.plan.armed = False
        self.plan.info = f"Launching player at {timing.fmt_hm(self.plan.target_time)}"
        log.info("trigger fired at %s", now.strftime("%H:%M:%S"))
        return [
            {"type": "unsubscribe_ticks"},
            {"type": "launch",
             "offset": self.plan.start_offset_seconds,
             "path": self.plan.media_path},
        ]


def update(plan: LaunchPlan, action: dict) -> List[Effect]:
    """Apply one action to *plan*; return effects for the caller to run."""
    sl = ScheduledLauncher(plan)
    t  = action.get("type")

    if t == "start":
        return sl.arm()
    if t == "tick":
        return sl.on_tick(action.get("now") or timing.local_now())
    if t == "watch_time_changed":
        return sl.set_target_time(action.get("text", ""))
    if t == "offset_changed":
        return sl.set_start_offset(action.get("text", ""))
    if t == "file_selected":
        return sl.set_media_path(action.get("path"))
    if t == "media_probed":
        return sl.set_media_length(action.get("path", ""), action.get("seconds", 0.0))
    if t == "open_file":
        return [{"type": "open_file_dialog"}]
    if t == "quit":
        return [{"type": "quit"}]

    log.warning("ignoring unknown action %r", t)
    return []
