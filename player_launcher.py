# =========  player_launcher.py  =========
"""
Starts the external media player.

Public API
----------
build_command(offset, path)  → argv list
run_player(argv)             → CompletedProcess, raises LaunchInvocationError
launch(offset, path)         → fire-and-forget on a daemon thread

Failures are logged only: the trigger is never re-armed and nothing is
reported back to the form.
"""
import logging
import subprocess
import threading
from typing import List, Optional

import config

log = logging.getLogger(__name__)


class LaunchInvocationError(RuntimeError):
    """The player could not be started or exited abnormally."""


def build_command(offset: int, path: str,
                  binary: Optional[str] = None,
                  fullscreen: Optional[bool] = None) -> List[str]:
    binary = binary or getattr(config, "PLAYER_BINARY", "vlc")
    if fullscreen is None:
        fullscreen = getattr(config, "FULLSCREEN", True)

    argv = [binary]
    if fullscreen:
        argv.append("--fullscreen")
    argv.append(f"--start-time={int(offset)}")
    if path:
        argv.append(path)
    return argv


def run_player(argv: List[str]) -> subprocess.CompletedProcess:
    """Run *argv* to completion, capturing output for the log."""
    log.debug("command: %s", argv)
    try:
        proc = subprocess.run(argv, capture_output=True)
    except OSError as exc:
        raise LaunchInvocationError(f"cannot start {argv[0]}: {exc}") from exc

    log.debug("status: %s", proc.returncode)
    log.debug("stdout: %s", proc.stdout.decode("utf-8", "replace"))
    log.debug("stderr: %s", proc.stderr.decode("utf-8", "replace"))

    if proc.returncode != 0:
        raise LaunchInvocationError(f"{argv[0]} exited with status {proc.returncode}")
    return proc


def _run_logged(argv: List[str]) -> None:
    try:
        run_player(argv)
    except LaunchInvocationError as exc:
        log.error("player launch failed: %s", exc)


def launch(offset: int, path: str) -> threading.Thread:
    """Start the player without blocking the UI loop."""
    if not path:
        log.warning("no media file selected; starting player without one")
    argv = build_command(offset, path)
    th = threading.Thread(target=_run_logged, args=(argv,), daemon=True,
                          name="player")
    th.start()
    return th
