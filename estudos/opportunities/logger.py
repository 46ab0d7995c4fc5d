"""Levelled loggers that write timestamped lines to a stream."""

from __future__ import annotations

import json
import re
import sys
from datetime import datetime
from typing import Any, TextIO

_VERB = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([a-zA-Z%])")


def _plain(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "<nil>" if value is None else str(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with printf-style verbs such as %v, %s, %d and %q."""
    values = list(args)

    def replace(match: re.Match) -> str:
        spec, verb = match.groups()
        if verb == "%":
            return "%"
        if not values:
            return f"%!{verb}(MISSING)"
        arg = values.pop(0)
        if verb in "dfFeEgGxXo":
            try:
                return f"%{spec}{verb}" % arg
            except TypeError:
                return f"%!{verb}({type(arg).__name__}={_plain(arg)})"
        text = json.dumps(_plain(arg), ensure_ascii=False) if verb == "q" else _plain(arg)
        return f"%{spec}s" % text

    result = _VERB.sub(replace, fmt)
    if values:
        extra = ", ".join(f"{type(a).__name__}={_plain(a)}" for a in values)
        result += f"%!(EXTRA {extra})"
    return result


class Logger:
    """Writes DEBUG, INFO, WARNING and ERROR lines with date and time."""

    def __init__(self, prefix: str = "", stream: TextIO | None = None) -> None:
        self.prefix = prefix
        self._stream = stream

    def _output(self, level: str, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        stream.write(f"{level}: {stamp} {message.rstrip(chr(10))}\n")
        stream.flush()

    def debug(self, *args: Any) -> None:
        self._output("DEBUG", " ".join(map(_plain, args)))

    def info(self, *args: Any) -> None:
        self._output("INFO", " ".join(map(_plain, args)))

    def warning(self, *args: Any) -> None:
        self._output("WARNING", " ".join(map(_plain, args)))

    def error(self, *args: Any) -> None:
        self._output("ERROR", " ".join(map(_plain, args)))

    def debugf(self, fmt: str, *args: Any) -> None:
        self._output("DEBUG", sprintf(fmt, *args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._output("INFO", sprintf(fmt, *args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self._output("WARNING", sprintf(fmt, *args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self._output("ERROR", sprintf(fmt, *args))


def get_logger(prefix: str) -> Logger:
    """Return a new logger writing to standard output."""
    return Logger(prefix)