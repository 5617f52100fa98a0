# This project was developed with assistance from AI tools.
"""Process-wide logging setup.

One stdout handler on the root logger; every module logs through
``logging.getLogger(__name__)``. Records carry the current request id.
"""

import logging
import sys

from ..middleware.request_id import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [rid=%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp ``record.request_id`` ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers (uvicorn reload re-imports the app)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel("INFO" if sql_echo else "WARNING")
