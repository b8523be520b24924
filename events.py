#!/usr/bin/env python3
"""
events.py  – central hub

• Translates raw Pygame events to high-level action dicts.
• Exposes a thread-safe queue so *any* external source can inject
  the same actions (file dialog worker, web API, …).
• Owns the tick timer that only runs while the launcher is armed.
"""

from __future__ import annotations
import queue
import pygame
from pygame.locals import *

import timing

Action = dict      # alias for readability

# Closed set of action types understood by launcher.update()
ACTION_TYPES = frozenset({
    "start",                # arm the trigger
    "open_file",            # ask for the native file dialog
    "file_selected",        # {"path": str | None}
    "watch_time_changed",   # {"text": str}
    "offset_changed",       # {"text": str}
    "tick",                 # {"now": datetime}
    "media_probed",         # {"path": str, "seconds": float}
    "quit",
})

TICK_EVENT = pygame.USEREVENT + 1


def subscribe_ticks(interval_ms: int) -> None:
    """Start the periodic tick event."""
    pygame.time.set_timer(TICK_EVENT, max(1, int(interval_ms)))


def unsubscribe_ticks() -> None:
    pygame.time.set_timer(TICK_EVENT, 0)


class EventManager:
    _fifo: "queue.Queue[Action]" = queue.Queue()      # global, thread-safe

    # ── SDL / keyboard / mouse path ────────────────────────────────────
    @classmethod
    def handle(cls, event, form=None) -> None:
        """Translate one Pygame event → action and enqueue it."""
        act = cls._translate_pygame(event, form)
        if act:
            cls._fifo.put(act)

    # ── external / programmatic path ───────────────────────────────────
    @classmethod
    def post(cls, action: Action) -> None:
        """
        Any thread may call this to inject an already-formed action dict, e.g.:
            EventManager.post({"type": "file_selected", "path": "/tmp/a.mp4"})
        """
        cls._fifo.put(action)

    # ── main-loop consumer ─────────────────────────────────────────────
    @classmethod
    def poll(cls) -> Action | None:
        """Return next queued action or None (non-blocking)."""
        try:
            return cls._fifo.get_nowait()
        except queue.Empty:
            return None

    @classmethod
    def clear(cls) -> None:
        while cls.poll() is not None:
            pass

    # ── internal translator ───────────────────────────────────────────
    @staticmethod
    def _translate_pygame(event, form=None) -> Action | None:
        if event.type == QUIT:
            return {"type": "quit"}

        if event.type == TICK_EVENT:
            return {"type": "tick", "now": timing.local_now()}

        if event.type == KEYDOWN and event.key == K_ESCAPE:
            return {"type": "quit"}

        # clicks and typing belong to the form widgets
        if form is not None:
            return form.handle_event(event)

        return None
