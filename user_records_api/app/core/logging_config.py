"""
Logging configuration for the User Records API.

``setup_logging`` reads ``LOG_LEVEL`` and ``LOG_FILE`` from the service
``Settings`` and attaches a console handler (plus a file handler when a
log file is configured) to the root logger.  Modules log through
``logging.getLogger(__name__)``, so records carry names such as
``user_records_api.app.core.storage``.  Configuration happens at most
once per process; repeated calls from ``create_app`` in tests are
ignored.
"""

import logging
from pathlib import Path

from .config import Settings, settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings = settings) -> None:
    """Configure the root logger from ``config``.

    Unknown level names fall back to ``INFO``.  A relative ``log_file``
    is resolved against the current working directory.  botocore is
    kept at WARNING unless the service itself runs at DEBUG, since its
    DEBUG output dumps every DynamoDB request.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if level > logging.DEBUG:
        logging.getLogger("botocore").setLevel(logging.WARNING)
