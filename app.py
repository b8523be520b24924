#!/usr/bin/env python3
"""
app.py – window, event pump and effect executor

Every input (window events, tick timer, file dialog worker, web remote)
arrives as an action dict through EventManager.  The main loop applies
each one with launcher.update() and runs the effects it returns; this is
the only place where the LaunchPlan is mutated.
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Optional

import pygame

import config
import events
import file_picker
import launcher
import media_probe
import player_launcher
from events       import EventManager
from form_view    import Form
from launch_plan  import LaunchPlan

log = logging.getLogger(__name__)


# ── helpers ────────────────────────────────────────────────────────────────
def _load_icon(path: str) -> Optional[pygame.Surface]:
    """Window icon, or None when the file is missing or unreadable."""
    if not path or not os.path.isfile(path):
        return None
    try:
        return pygame.image.load(path)
    except pygame.error as exc:
        log.warning("cannot load icon %s: %s", path, exc)
        return None


# ── main application ───────────────────────────────────────────────────────
class LauncherApp:
    def __init__(self):
        # window ----------------------------------------------------------
        pygame.init()
        icon = _load_icon(getattr(config, "ICON_PATH", ""))
        if icon is not None:
            pygame.display.set_icon(icon)
        pygame.display.set_caption(getattr(config, "WINDOW_TITLE", "Together"))
        self.screen = pygame.display.set_mode(config.WINDOWED_SIZE, pygame.RESIZABLE)
        self.clock  = pygame.time.Clock()

        # core state ------------------------------------------------------
        self.plan    = LaunchPlan()
        self.form    = Form()
        self.running = False
        self._dialog: Optional[threading.Thread] = None

    # ── effects ------------------------------------------------------------
    def _execute(self, effect: dict) -> None:
        t = effect["type"]
        if t == "subscribe_ticks":
            events.subscribe_ticks(getattr(config, "TICK_INTERVAL_MS", 20))
        elif t == "unsubscribe_ticks":
            events.unsubscribe_ticks()
        elif t == "launch":
            player_launcher.launch(effect["offset"], effect["path"])
        elif t == "open_file_dialog":
            if self._dialog and self._dialog.is_alive():
                log.debug("file dialog already open")
                return
            self._dialog = file_picker.pick_file(EventManager.post)
        elif t == "probe_media":
            media_probe.probe_async(effect["path"], EventManager.post)
        elif t == "quit":
            self.running = False
        else:
            log.warning("ignoring unknown effect %r", t)

    def dispatch(self, act: dict) -> None:
        self.form.sync(act)
        for eff in launcher.update(self.plan, act):
            self._execute(eff)

    # ── main loop ---------------------------------------------------------
    def run(self):
        self.running = True
        while self.running:
            for e in pygame.event.get():
                EventManager.handle(e, self.form)

            # drain window + external queue (non-blocking)
            while self.running and (act := EventManager.poll()):
                self.dispatch(act)

            self.form.draw(self.screen, self.plan)
            pygame.display.flip()
            self.clock.tick(config.FPS)

        events.unsubscribe_ticks()
        pygame.quit()


if __name__ == "__main__":
    LauncherApp().run()
