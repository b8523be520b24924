"""
form_view.py

Pygame rendering of the launcher form.  A direct reflection of the
LaunchPlan: it draws the plan and forwards widget actions, nothing more.
"""

from __future__ import annotations

import os
import pygame

import config
import timing
from launch_plan import LaunchPlan
from widgets import Button, TextField, WHITE, GREEN, GREY

RED = (255, 50, 50)
YEL = (200, 200, 50)
BG  = (0, 0, 0)

_ROW   = 30     # widget height
_GAP   = 20     # vertical space between rows
_LABEL = 190    # label column width


class Form:
    def __init__(self, left: int | None = None, top: int | None = None):
        pygame.font.init()
        self.font  = pygame.font.SysFont("monospace", 18)
        self.small = pygame.font.SysFont("monospace", 14)

        x = config.FORM_LEFT if left is None else left
        y = config.FORM_TOP if top is None else top
        self.left = x

        self.time_field = TextField((x + _LABEL, y, 100, _ROW), "watch_time_changed",
                                    getattr(config, "WATCH_TIME_HINT", ""))
        self.time_echo_y = y + _ROW + _GAP
        y = self.time_echo_y + _ROW + _GAP

        self.offset_field = TextField((x + _LABEL, y, 100, _ROW), "offset_changed",
                                      getattr(config, "START_OFFSET_HINT", ""))
        self.offset_echo_y = y + _ROW + _GAP
        y = self.offset_echo_y + _ROW + _GAP

        self.file_button = Button((x, y, 140, _ROW), "Select file", "open_file")
        self.path_y = y + _ROW + _GAP
        y = self.path_y + _ROW + _GAP

        self.start_button = Button((x, y, 140, _ROW), "Start", "start")
        self.info_y = y + _ROW + _GAP

        self.fields  = (self.time_field, self.offset_field)
        self.buttons = (self.file_button, self.start_button)

    # ------------ input --------------------------------------------------
    def handle_event(self, event) -> dict | None:
        act = None
        for w in (*self.fields, *self.buttons):
            act = w.handle_event(event) or act
        return act

    def sync(self, action: dict) -> None:
        """Mirror text that arrived from outside the window (web remote)."""
        if action.get("type") == "watch_time_changed":
            self.time_field.text = action.get("text", "")
        elif action.get("type") == "offset_changed":
            self.offset_field.text = action.get("text", "")

    # ------------ drawing ------------------------------------------------
    def _label(self, surface, text, y, colour=WHITE, font=None):
        font = font or self.font
        txt = font.render(text, True, colour)
        surface.blit(txt, (self.left, y + (_ROW - txt.get_height()) // 2))

    def draw(self, surface: pygame.Surface, plan: LaunchPlan) -> None:
        surface.fill(BG)

        self._label(surface, "Watch time:", self.time_field.rect.y)
        self._label(surface, timing.fmt_hm(plan.target_time), self.time_echo_y)

        self._label(surface, "Video begin second:", self.offset_field.rect.y)
        self._label(surface, str(plan.start_offset_seconds), self.offset_echo_y)

        if plan.media_path:
            line = os.path.basename(plan.media_path)
            if plan.media_length:
                line += f"  ({timing.fmt_hms(plan.media_length)})"
            self._label(surface, line, self.path_y, font=self.small)
            self._label(surface, plan.media_path, self.path_y + 18, GREY, self.small)
        else:
            self._label(surface, "No file selected", self.path_y, GREY)

        if plan.info:
            colour = RED if plan.info.startswith("Invalid") else YEL
            self._label(surface, plan.info, self.info_y, colour)

        for w in (*self.fields, *self.buttons):
            w.draw(surface, self.font)

        self._draw_badge(surface, plan)

    def _draw_badge(self, surface: pygame.Surface, plan: LaunchPlan) -> None:
        """State + clock in the top-left corner."""
        state  = "ARMED" if plan.armed else "IDLE"
        colour = GREEN if plan.armed else GREY
        now    = timing.local_now().strftime("%H:%M:%S")
        txt = self.small.render(f"{state}  {now}", True, colour)
        bg  = pygame.Surface((txt.get_width() + 10, txt.get_height() + 6), pygame.SRCALPHA)
        bg.fill((0, 0, 0, 180))
        bg.blit(txt, (5, 3))
        surface.blit(bg, (10, 10))
