# config.py
"""
Configuration settings for the scheduled launcher.
"""
import logging

# ── Basic Application Settings ──────────────────────────────────────────────

WINDOW_TITLE = "Together"
ICON_PATH    = "together.png"          # optional; skipped when missing

# Display settings
WINDOWED_SIZE = (800, 600)
FPS           = 30

# Form block position inside the window
FORM_LEFT = 260
FORM_TOP  = 100

# ── Trigger ────────────────────────────────────────────────────────────────

# Poll period (ms) of the tick timer while armed.  Any value well under a
# minute gives the same minute-granularity trigger.
TICK_INTERVAL_MS = 20

# Placeholders shown in empty fields
WATCH_TIME_HINT   = "13:20"
START_OFFSET_HINT = "20"

# ── External player ────────────────────────────────────────────────────────

PLAYER_BINARY = "vlc"
FULLSCREEN    = True

# Extensions offered first in the file dialog
MEDIA_EXTENSIONS = ("mp4", "mkv", "mov", "avi", "webm", "flv", "mp3", "wav")

# ── Web remote ─────────────────────────────────────────────────────────────

WEB_REMOTE            = True
WEB_HOST              = "127.0.0.1"   # "" to listen on every interface
WEB_PORT              = 8080
DIAG_REFRESH_INTERVAL = 1.0

# ── Logging ────────────────────────────────────────────────────────────────

LOG_LEVEL  = logging.DEBUG
LOG_FILE   = "runtime.log"
LOG_MAX_BYTES = 1_000_000    # rotate runtime.log past ~1 MB
LOG_BACKUPS   = 3
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
