# beam_solver/logger.py
# Lightweight logging utilities for the planner.
# Lets the CLI show every planning attempt and rollback without polluting the report on stdout.

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Logger:
    enabled: bool = False
    prefix: str = "[BEAMS]"

    def info(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} {msg}", file=sys.stderr)

    def warn(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} WARNING: {msg}", file=sys.stderr)

    def error(self, msg: str) -> None:
        print(f"{self.prefix} ERROR: {msg}", file=sys.stderr)


# Global default logger, quiet until the CLI passes --verbose
LOGGER = Logger()


def set_enabled(flag: bool) -> None:
    LOGGER.enabled = bool(flag)


def get_logger() -> Logger:
    return LOGGER
