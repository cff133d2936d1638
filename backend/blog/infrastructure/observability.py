"""Blog Logging — one JSON line per record, tagged with the user/post/comment it concerns.

Invariants:
    - Every line carries timestamp (the record's creation time, UTC), level, logger, message
    - user_id, post_id, comment_id, error_code and path are copied from `extra=` when set
    - setup_logging can run once per app startup without stacking handlers
    - Passwords and tokens are never passed as extras by any caller

Design Decisions:
    - Stdlib logging only; services log through logging.getLogger(__name__)
    - "text" format is for local runs and the test suite
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("user_id", "post_id", "comment_id", "error_code", "path")
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx")


class JSONFormatter(logging.Formatter):
    """Render a record and its blog extras as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _BlogHandler(logging.StreamHandler):
    """Marker type so a second setup_logging call replaces, not duplicates."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the blog handler on the root logger and return it."""
    for existing in [h for h in logging.root.handlers if isinstance(h, _BlogHandler)]:
        logging.root.removeHandler(existing)

    handler = _BlogHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # request-level noise from the engine and the API client
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
