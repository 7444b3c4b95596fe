"""Console messages and an error log file."""

from __future__ import annotations

import datetime
import json
import os
import re
import sys
from typing import TextIO

from timeping import ostools

DEFAULT_LOG_PATH = "./timeping.log"

_PLAIN = re.compile(r"[A-Za-z0-9\-._/@^+]*")
_logfile: TextIO | None = None


def common(message: str, *tags: str) -> None:
    """Print ``message`` prefixed by ``[TimePing]`` and each tag."""
    print("[TimePing]" + "".join(f"[{tag}]  " for tag in tags) + message)


def init_log(path: str | os.PathLike[str] = DEFAULT_LOG_PATH) -> None:
    """Open, creating if needed, the log file that ``err_in`` appends to."""
    global _logfile
    try:
        if not ostools.file_exists(path):
            ostools.create_file(path)
        handle = ostools.open_file(path)
    except OSError:
        print("timeping.log 请检查权限")
        raise
    handle.seek(0, os.SEEK_END)
    exit_log()
    _logfile = handle


def exit_log() -> None:
    """Close the log file, if open."""
    global _logfile
    if _logfile is not None:
        _logfile.close()
        _logfile = None


def err_in(message: str, *tags: str) -> None:
    """Write ``message`` at error level to the log file, or stderr if none is open."""
    stamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    text = message if _PLAIN.fullmatch(message) else json.dumps(message, ensure_ascii=False)
    out = _logfile or sys.stderr
    out.write(f'time="{stamp}" level=error msg={text}\n')
    out.flush()