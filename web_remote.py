#!/usr/bin/env python3
"""
web_remote.py  –  web UI + diagnostics + remote control

Endpoints
---------
/               → HTML page with controls, live plan status and diagnostics
/status         → JSON snapshot of the LaunchPlan
/diag, /data    → JSON object of diagnostic metrics
/action?cmd=…   → inject control commands (start, time, offset, file, quit)
/log            → contents of the runtime log (if present)

The server only *posts* actions; the UI thread applies them.
"""

from __future__ import annotations
import http.server
import json
import logging
import os.path
import platform
import socketserver
import threading
import time
import traceback
import urllib.parse
from typing import TYPE_CHECKING, Any

import psutil

from events import EventManager
import config

if TYPE_CHECKING:                       # avoid circular import at runtime
    from app import LauncherApp

log = logging.getLogger(__name__)

# ── diagnostics refresh cadence ───────────────────────────────────────────
_last_diag_time = 0.0
_diag_interval  = getattr(config, "DIAG_REFRESH_INTERVAL", 1.0)

# ── global diagnostic store ───────────────────────────────────────────────
monitor_data: dict[str, Any] = {
    "cpu_percent":       0.0,
    "mem_used":          "0 MB",
    "mem_total":         "0 MB",
    "process_rss":       "0 MB",
    "script_uptime":     "0d 00:00:00",
    "machine_uptime":    "0d 00:00:00",
    "last_http_crash":   "",
    "python_version":    platform.python_version(),
}

_script_start = time.monotonic()
_boot_time    = psutil.boot_time()


# ── helpers ────────────────────────────────────────────────────────────────
def _fmt_duration(secs: float) -> str:
    d, rem = divmod(int(secs), 86400)
    h, rem = divmod(rem, 3600)
    m, s   = divmod(rem, 60)
    return f"{d}d {h:02}:{m:02}:{s:02}"


def _maybe_update_diagnostics() -> None:
    global _last_diag_time
    now = time.monotonic()
    if now - _last_diag_time >= _diag_interval:
        _last_diag_time = now
        _update_diagnostics()


def _update_diagnostics() -> None:
    """Refresh CPU, memory and uptime in `monitor_data`."""
    monitor_data["cpu_percent"] = psutil.cpu_percent()
    vm = psutil.virtual_memory()
    monitor_data["mem_used"]  = f"{vm.used // 1024**2} MB"
    monitor_data["mem_total"] = f"{vm.total // 1024**2} MB"
    rss = psutil.Process().memory_info().rss
    monitor_data["process_rss"] = f"{rss // 1024**2} MB"
    now = time.monotonic()
    monitor_data["script_uptime"]  = _fmt_duration(now - _script_start)
    monitor_data["machine_uptime"] = _fmt_duration(time.time() - _boot_time)


def action_from_query(query: str) -> dict:
    """
    Map an `/action` query string to an action dict.
    Raises ValueError for unknown commands or missing values.
    """
    qs  = urllib.parse.parse_qs(query)
    cmd = qs.get("cmd", [""])[0]

    if cmd == "start":
        return {"type": "start"}
    if cmd == "quit":
        return {"type": "quit"}
    if cmd == "time":
        return {"type": "watch_time_changed", "text": qs.get("value", [""])[0]}
    if cmd == "offset":
        return {"type": "offset_changed", "text": qs.get("value", [""])[0]}
    if cmd == "file":
        path = qs.get("path", [""])[0]
        if not path:
            raise ValueError("Missing path")
        # absolute only, so it never starts with '-'
        if not os.path.isabs(path):
            raise ValueError("Path must be absolute")
        return {"type": "file_selected", "path": path}

    raise ValueError("Unknown cmd")


# ── reusable threaded HTTP server ──────────────────────────────────────────
class ReusableTCPServer(socketserver.ThreadingMixIn, http.server.HTTPServer):
    daemon_threads      = True
    allow_reuse_address = True


# ── request handler ────────────────────────────────────────────────────────
class RemoteHandler(http.server.BaseHTTPRequestHandler):
    def log_message(self, fmt, *args):
        log.debug("%s - %s", self.address_string(), fmt % args)

    def do_GET(self):
        parsed = urllib.parse.urlparse(self.path)
        path, qs = parsed.path, parsed.query

        if path == "/":
            return self._serve_html()
        if path == "/status":
            return self._serve_json(self.server.app.plan.as_dict())   # type: ignore
        if path in ("/diag", "/data"):
            _maybe_update_diagnostics()
            return self._serve_json(monitor_data)
        if path == "/log":
            return self._serve_log()
        if path == "/action":
            return self._serve_action(qs)

        self.send_error(404, "Not found")

    # ── helpers for each route ───────────────────────────────────────────
    def _serve_html(self):
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.end_headers()
        self.wfile.write(HTML_PAGE.encode("utf-8"))

    def _serve_json(self, obj: Any):
        b = json.dumps(obj).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(b)))
        self.end_headers()
        self.wfile.write(b)

    def _serve_log(self):
        log_file = getattr(config, "LOG_FILE", "runtime.log")
        try:
            with open(log_file, "rb") as f:
                data = f.read()
        except OSError:
            return self.send_error(404, "Log file not found")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def _serve_action(self, query: str):
        try:
            act = action_from_query(query)
        except ValueError as exc:
            return self.send_error(400, str(exc))
        EventManager.post(act)
        self.send_response(204)
        self.end_headers()


# ── simple HTML UI ─────────────────────────────────────────────────────────
HTML_PAGE = """
<!doctype html><html><head><meta charset="utf-8">
<title>Together Remote</title>
<style>
 body{background:#000;color:#0f0;font-family:monospace;padding:1em;}
 a.button,button{display:inline-block;margin:4px;padding:6px 12px;border:1px solid #0f0;
          text-decoration:none;color:#0f0;background:#000;font-family:monospace;}
 input{background:#111;color:#0f0;border:1px solid #0f0;font-family:monospace;}
 pre{margin:0.5em 0;font-family:monospace;}
</style></head><body>
<h2>Together Remote</h2>
<div>
 Watch time <input id="time" size="6" placeholder="13:20">
 <button onclick="send('time','value',time.value)">Set</button>
</div>
<div>
 Video begin second <input id="offset" size="6" placeholder="20">
 <button onclick="send('offset','value',offset.value)">Set</button>
</div>
<div>
 File <input id="file" size="40">
 <button onclick="send('file','path',file.value)">Set</button>
</div>
<a class="button" href="#" onclick="send('start');return false;">Start</a>
<a class="button" href="#" onclick="send('quit');return false;">Quit</a>
<a class="button" href="/log">View log</a>

<div><h3>Plan</h3><pre id="status"></pre></div>
<div><h3>Diagnostics</h3><pre id="diag"></pre></div>

<script>
 function send(cmd, key, val){
   let url = '/action?cmd=' + cmd;
   if (key) url += '&' + key + '=' + encodeURIComponent(val);
   fetch(url);
 }
 function dump(obj){
   let txt = '';
   for (let [k,v] of Object.entries(obj)){
     txt += k.padEnd(22,' ') + v + '\\n';
   }
   return txt;
 }
 async function refreshUI(){
   try {
     let s = await fetch('/status'); document.getElementById('status').textContent = dump(await s.json());
     let d = await fetch('/diag');   document.getElementById('diag').textContent   = dump(await d.json());
   } catch(e){
     console.error(e);
   }
 }
 setInterval(refreshUI, 1000);
 refreshUI();
</script>
</body></html>
"""


# ── server bootstrap with auto-restart ────────────────────────────────────
def start(app: "LauncherApp", port: int = getattr(config, "WEB_PORT", 8080),
          host: str = getattr(config, "WEB_HOST", "127.0.0.1")):
    def _serve_loop():
        while True:
            try:
                with ReusableTCPServer((host, port), RemoteHandler) as httpd:
                    httpd.app = app
                    httpd.serve_forever()
            except Exception:
                monitor_data["last_http_crash"] = traceback.format_exc()
                log.exception("web remote crashed; restarting")
                time.sleep(1)

    th = threading.Thread(target=_serve_loop, daemon=True, name="web-remote")
    th.start()
    log.info("web remote listening on %s:%s", host or "*", port)
    return th
