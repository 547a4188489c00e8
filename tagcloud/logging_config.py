from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


_CONSOLE = Console(stderr=True)


def get_console() -> Console:
    return _CONSOLE


def setup_logging(level: int = logging.WARNING) -> None:
    """Install a Rich handler on the root logger.

    Only the first call adds a handler; later calls just adjust the level.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(isinstance(h, RichHandler) for h in root_logger.handlers):
        return

    handler = RichHandler(
        console=get_console(),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
