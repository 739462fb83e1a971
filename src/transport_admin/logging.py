"""Package logger with a per-process session id in every record."""
import logging
import sys
import uuid

from transport_admin.config import settings

_SESSION_ID = uuid.uuid4().hex[:8]


def get_session_id() -> str:
    """Return the id stamped on every log line of this process."""
    return _SESSION_ID


def _build_logger() -> logging.Logger:
    log = logging.getLogger("transport_admin")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            f"%(asctime)s [%(levelname)s] [{_SESSION_ID}] %(name)s: %(message)s"
        ))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    log.propagate = False
    return log


logger = _build_logger()
