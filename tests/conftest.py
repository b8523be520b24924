import os

# headless pygame for widget / event tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from events import EventManager


@pytest.fixture(autouse=True)
def _empty_queue():
    EventManager.clear()
    yield
    EventManager.clear()
