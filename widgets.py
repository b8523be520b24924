"""
widgets.py – minimal Pygame form widgets (text field, button).

Widgets never touch the LaunchPlan: they turn clicks and typing into
action dicts and draw whatever text they are given.
"""

from __future__ import annotations

import pygame
from pygame.locals import *

# ── colours ────────────────────────────────────────────────────────────────
WHITE  = (255, 255, 255)
GREY   = (120, 120, 120)
GREEN  = (0, 255, 0)
FIELD  = (30, 30, 30)
BUTTON = (40, 90, 160)
HOVER  = (60, 120, 200)


class TextField:
    """Single-line input; every edit yields `{"type": action, "text": …}`."""

    def __init__(self, rect, action: str, placeholder: str = "", text: str = ""):
        self.rect        = pygame.Rect(rect)
        self.action      = action
        self.placeholder = placeholder
        self.text        = text
        self.focused     = False

    # ------------ editing ----------------------------------------------
    def _changed(self) -> dict:
        return {"type": self.action, "text": self.text}

    def insert(self, s: str) -> dict:
        self.text += s
        return self._changed()

    def backspace(self) -> dict | None:
        if not self.text:
            return None
        self.text = self.text[:-1]
        return self._changed()

    def handle_event(self, event) -> dict | None:
        if event.type == MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return None
        if not self.focused:
            return None
        if event.type == TEXTINPUT:
            return self.insert(event.text)
        if event.type == KEYDOWN:
            if event.key == K_BACKSPACE:
                return self.backspace()
            if event.key in (K_RETURN, K_KP_ENTER, K_TAB):
                self.focused = False
        return None

    # ------------ drawing ----------------------------------------------
    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, FIELD, self.rect)
        pygame.draw.rect(surface, GREEN if self.focused else GREY, self.rect, 1)
        shown, colour = (self.text, WHITE) if self.text else (self.placeholder, GREY)
        txt = font.render(shown, True, colour)
        y = self.rect.y + (self.rect.height - txt.get_height()) // 2
        surface.blit(txt, (self.rect.x + 6, y))


class Button:
    def __init__(self, rect, label: str, action: str):
        self.rect   = pygame.Rect(rect)
        self.label  = label
        self.action = action

    def handle_event(self, event) -> dict | None:
        if (event.type == MOUSEBUTTONDOWN and event.button == 1
                and self.rect.collidepoint(event.pos)):
            return {"type": self.action}
        return None

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        hot = self.rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(surface, HOVER if hot else BUTTON, self.rect, border_radius=4)
        txt = font.render(self.label, True, WHITE)
        surface.blit(txt, txt.get_rect(center=self.rect.center))
