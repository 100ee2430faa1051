from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any

from .either import Either


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Structured stderr logger. Field names never clash with the call's own arguments."""

    def __init__(self, name: str = "eitherpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context={**self.context, **fields})

    def enabled(self, level: str) -> bool:
        return _LEVELS[level] >= self.level

    def write(self, level: str, msg: str, fields: Optional[Dict[str, Any]] = None) -> None:
        if not self.enabled(level):
            return
        record: Dict[str, Any] = {
            "ts": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "name": self.name,
            "level": level,
            "msg": msg,
        }
        merged = {**self.context, **(fields or {})}
        if self.json_output:
            if merged:
                record["fields"] = merged
            line = json.dumps(record, separators=(",", ":"), default=str)
        else:
            extras = "".join(f" {k}={v}" for k, v in sorted(merged.items()))
            line = f"[{record['ts']}] {self.name} {level}: {msg}{extras}"
        print(line, file=sys.stderr)

    def debug(self, msg: str, /, **fields: Any) -> None: self.write("DEBUG", msg, fields)
    def info(self, msg: str, /, **fields: Any) -> None: self.write("INFO", msg, fields)
    def warn(self, msg: str, /, **fields: Any) -> None: self.write("WARN", msg, fields)
    def error(self, msg: str, /, **fields: Any) -> None: self.write("ERROR", msg, fields)

    def outcome(self, op: str, result: Either[Any, Any], fields: Optional[Dict[str, Any]] = None) -> None:
        """Log a Left at ERROR with its payload as ``error``; a Right at DEBUG."""
        if result.is_left():
            self.write("ERROR", f"fail {op}: {result.get_value()}", {**(fields or {}), "either": "left", "error": result.get_value()})
        else:
            self.write("DEBUG", f"ok {op}", {**(fields or {}), "either": "right"})
