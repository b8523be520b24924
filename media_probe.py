"""
media_probe.py – clip length lookup for the form's file line.

Opening a file can stall (network shares, URLs), so the app only calls
`probe_async()`, which answers with a `media_probed` action.
"""

import threading
from typing import Callable, Optional

import av  # PyAV – thin FFmpeg bindings


def probe_length(fp: str) -> float:
    """Return clip length in **seconds**. Zero on error."""
    if not fp:
        return 0.0
    try:
        with av.open(fp) as container:
            return max(0.0, (container.duration or 0) / av.time_base)
    except Exception:
        return 0.0


def probe_async(fp: str, post: Callable[[dict], None],
                probe: Optional[Callable[[str], float]] = None) -> threading.Thread:
    def _worker():
        seconds = (probe or probe_length)(fp)
        post({"type": "media_probed", "path": fp, "seconds": seconds})

    th = threading.Thread(target=_worker, daemon=True, name="media-probe")
    th.start()
    return th
