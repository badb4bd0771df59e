"""
Logging configuration for the Smart Deals API.

Every module logs through ``logging.getLogger(__name__)``, so all
records of this project live under the ``smart_deals_api`` hierarchy:

* ``smart_deals_api.app.services.*`` report writes at INFO (created,
  updated and deleted ids) and lookups at DEBUG;
* ``smart_deals_api.app.core.db`` reports the start‑up ping and the
  closing of the MongoDB client;
* ``smart_deals_api.app.core.errors`` reports rejected requests at INFO
  and store failures at ERROR with their traceback.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called, and on every
call sets the level of the project hierarchy and caps the chatty
``pymongo`` driver loggers at WARNING.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "smart_deals_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the project's loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)
    # Driver command and connection events are only useful when
    # debugging the driver itself.
    logging.getLogger("pymongo").setLevel(max(numeric_level, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        # Handlers already installed, by pytest or an earlier ``create_app``.
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
