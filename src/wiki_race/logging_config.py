"""
Logging setup for wiki_race.

Everything is routed through the root logger to stderr, so the paths and
hints the CLI prints on stdout can be piped without log noise.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO
from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"

# Every oracle call goes through httpx; its request lines drown the navigators' own output
NOISY_LOGGERS = ("httpx", "httpcore")


def _build_handler(numeric_level: int, use_rich: bool, stream: TextIO) -> logging.Handler:
    if use_rich:
        handler = RichHandler(
            console=Console(file=stream),
            level=numeric_level,
            show_path=True,
            rich_tracebacks=True,
            markup=False,  # Article titles may contain square brackets
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S"))

    handler.setLevel(numeric_level)
    return handler


def setup_logging(
    level: str = "INFO",
    use_rich: bool = True,
    stream: Optional[TextIO] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Replace the root logger's handlers with a single console handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR); unknown names fall back to INFO
        use_rich: Colored RichHandler output instead of plain lines
        stream: Where to write; stderr by default
        quiet: Loggers capped at WARNING whatever ``level`` is
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(_build_handler(numeric_level, use_rich, stream or sys.stderr))

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")


def setup_dev_logging(level: str = "DEBUG") -> None:
    """Rich output with debug detail."""
    setup_logging(level=level, use_rich=True)


def setup_prod_logging(level: str = "INFO") -> None:
    """Plain timestamped lines, suitable for log collectors."""
    setup_logging(level=level, use_rich=False)
