"""
file_picker.py – native "open file" dialog off the UI thread.

The dialog runs on its own worker thread with a private hidden Tk root;
its result comes back to the main loop as a `file_selected` action.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Callable, Optional

import config

log = logging.getLogger(__name__)


def _filetypes() -> list[tuple[str, str]]:
    exts = getattr(config, "MEDIA_EXTENSIONS", ())
    types = []
    if exts:
        types.append(("Media files", " ".join(f"*.{e}" for e in exts)))
    types.append(("All files", "*"))
    return types


def ask_path() -> Optional[str]:
    """Blocking dialog; absolute path or None when cancelled."""
    import tkinter as tk
    from tkinter import filedialog

    root = tk.Tk()
    root.withdraw()
    try:
        root.attributes("-topmost", True)
        chosen = filedialog.askopenfilename(parent=root, title="Select file",
                                            filetypes=_filetypes())
    finally:
        root.destroy()

    # tkinter returns "" (or an empty tuple) on cancel
    if not chosen:
        return None
    return os.path.abspath(chosen)


def pick_file(post: Callable[[dict], None],
              ask: Callable[[], Optional[str]] = ask_path) -> threading.Thread:
    """Show the dialog on a worker thread and post the outcome."""
    def _worker():
        try:
            path = ask()
        except Exception:
            log.exception("file dialog failed")
            path = None
        post({"type": "file_selected", "path": path})

    th = threading.Thread(target=_worker, daemon=True, name="file-dialog")
    th.start()
    return th
