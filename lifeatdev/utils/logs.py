# utils/logs.py
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import BASE_DIR, LifeAtDevConfig


@dataclass(frozen=True)
class _Ansi:
    reset: str = "\x1b[0m"
    red: str = "\x1b[31m"
    yellow: str = "\x1b[33m"
    cyan: str = "\x1b[36m"
    gray: str = "\x1b[90m"


ANSI = _Ansi()
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _supports_color() -> bool:
    if os.getenv("NO_COLOR"):
        return False
    stream = sys.stdout
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    return True


def _resolve_log_path(raw_path: Optional[str]) -> Path:
    path = Path(raw_path).expanduser() if raw_path else BASE_DIR / "lifeatdev.log"
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


class _ColorFormatter(logging.Formatter):
    def __init__(self, *, use_color: bool):
        super().__init__(LOG_FORMAT, "%H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        if not self.use_color:
            return msg

        if record.levelno >= logging.ERROR:
            color = ANSI.red
        elif record.levelno >= logging.WARNING:
            color = ANSI.yellow
        elif record.levelno >= logging.INFO:
            color = ANSI.cyan
        else:
            color = ANSI.gray

        return f"{color}{msg}{ANSI.reset}"


def setup_logging(
    *,
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
    to_file: bool = True,
) -> logging.Logger:
    """
    Configure the root logger with a file handler and a colored console handler.
    Library code never calls this; hosts (scripts, UI shells) do.
    """
    debug = LifeAtDevConfig.LOGGING.DEBUG_MODE if debug is None else debug
    level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if to_file:
        log_path = _resolve_log_path(log_file or LifeAtDevConfig.LOGGING.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_ColorFormatter(use_color=_supports_color()))
    root.addHandler(console_handler)

    return logging.getLogger("lifeatdev")
