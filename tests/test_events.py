import datetime
import threading

import pygame
from pygame.locals import KEYDOWN, K_ESCAPE, QUIT

import events
from events import EventManager, TICK_EVENT


def test_post_and_poll_fifo():
    EventManager.post({"type": "start"})
    EventManager.post({"type": "quit"})
    assert EventManager.poll() == {"type": "start"}
    assert EventManager.poll() == {"type": "quit"}
    assert EventManager.poll() is None


def test_post_from_other_thread():
    th = threading.Thread(target=EventManager.post,
                          args=({"type": "file_selected", "path": None},))
    th.start()
    th.join()
    assert EventManager.poll() == {"type": "file_selected", "path": None}


def test_quit_and_escape_translate_to_quit():
    EventManager.handle(pygame.event.Event(QUIT))
    EventManager.handle(pygame.event.Event(KEYDOWN, key=K_ESCAPE, mod=0, unicode=""))
    assert EventManager.poll() == {"type": "quit"}
    assert EventManager.poll() == {"type": "quit"}


def test_tick_event_carries_local_time():
    EventManager.handle(pygame.event.Event(TICK_EVENT))
    act = EventManager.poll()
    assert act["type"] == "tick"
    assert isinstance(act["now"], datetime.datetime)


def test_other_events_go_to_form():
    class Form:
        def handle_event(self, event):
            return {"type": "open_file"}

    EventManager.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)), Form())
    assert EventManager.poll() == {"type": "open_file"}


def test_unknown_event_without_form_is_dropped():
    EventManager.handle(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0)))
    assert EventManager.poll() is None


def test_tick_subscription_toggles_timer(monkeypatch):
    calls = []
    monkeypatch.setattr(events.pygame.time, "set_timer", lambda ev, ms: calls.append((ev, ms)))
    events.subscribe_ticks(20)
    events.unsubscribe_ticks()
    assert calls == [(TICK_EVENT, 20), (TICK_EVENT, 0)]


def test_action_types_are_closed():
    assert "tick" in events.ACTION_TYPES
    assert "stop" not in events.ACTION_TYPES
