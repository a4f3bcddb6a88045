"""
Logging setup shared by the facade API and the mock employee store.

Both services call ``setup_logging`` from their ``create_app``.  When
they run in one process (see ``run.py``) the first call configures
the root logger and later calls leave it alone.  Connection pool
chatter from ``urllib3``, which ``requests`` logs at DEBUG for every
call to the store, is held at WARNING.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = ("urllib3",),
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``), case insensitive.
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Also write to this file when given.
    quiet : Iterable[str]
        Loggers capped at WARNING regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
