from __future__ import annotations
import sys, datetime as _dt, json
from typing import Dict, Any


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_no(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"unknown log level {level!r}; expected one of {', '.join(_LEVELS)}") from None


class ConsoleLogger:
    """Line-oriented logger writing to stderr, as text or one JSON object per line."""
    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False):
        self.name = name
        self.level = _level_no(level)
        self.json_output = json_output

    def set_level(self, level: str) -> None:
        self.level = _level_no(level)

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= self.level

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
        if self.json_output:
            if fields:
                data["fields"] = fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join(f" {k}={v!r}" for k, v in sorted(fields.items()))
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)
