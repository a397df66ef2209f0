"""Logging setup: plain text for local runs, one JSON object per line otherwise."""

import json
import logging
from datetime import datetime, timezone

# Structured fields passed through ``extra=`` that the JSON formatter surfaces
EXTRA_FIELDS = ("request_id", "method", "path", "status_code", "user_id", "event")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    root = logging.getLogger()
    # Repeated app creation (tests, reloads) must not stack handlers
    for handler in list(root.handlers):
        if getattr(handler, "_qa_forum", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._qa_forum = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
