"""Minimal structured logging helper.

Emits one ``key=value`` line (or one JSON object with ``MAZEGEN_LOG_JSON=1``)
per event, tagged with level, timestamp and logger name.

Usage:
    from .logging_utils import get_logger
    log = get_logger("mazegen.generator")
    log.debug(event="phase_done", phase="build_maze", ms=3)

The threshold comes from ``MAZEGEN_LOG_LEVEL`` (debug, info, warn, error).
Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def current_level() -> int:
    return LEVELS.get(os.getenv("MAZEGEN_LOG_LEVEL", "info").lower(), 20)


def json_mode() -> bool:
    return os.getenv("MAZEGEN_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _kv(key: str, value) -> str:
    if isinstance(value, (int, float)):
        return f"{key}={value}"
    return f"{key}={str(value).replace(' ', '_')}"


def _format(level: str, **fields) -> str:
    fields = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if json_mode():
        return json.dumps({**fields, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    return " ".join([f"level={level}", f"ts={ts}"] + [_kv(k, v) for k, v in fields.items()])


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegen"

    def enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= current_level()

    def _log(self, lvl: str, **fields):
        if not self.enabled(lvl):
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegen")
