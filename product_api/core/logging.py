"""
Logging Setup

Single stream handler on the root logger; modules log through
``logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "product_api"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Calling it again only updates the level, so reloads under uvicorn do not
    stack handlers.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
