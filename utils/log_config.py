# utils/log_config.py
"""
Logging setup: JSON lines in production, plain text for local work.

setup_logging() is called once from main.py on import.
"""
import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("apartment_id", "error_code", "path", "total", "page")


class JSONFormatter(logging.Formatter):
     """Format log records as single-line JSON objects."""

     def format(self, record: logging.LogRecord) -> str:
          log = {
               "timestamp": datetime.now(timezone.utc).isoformat(),
               "level": record.levelname,
               "logger": record.name,
               "message": record.getMessage(),
          }
          for key in _EXTRA_FIELDS:
               val = record.__dict__.get(key)
               if val is not None:
                    log[key] = val
          if record.exc_info:
               log["exception"] = self.formatException(record.exc_info)
          return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
     """Configure the root logger. Safe to call more than once."""
     handler = logging.StreamHandler()
     if fmt == "json":
          handler.setFormatter(JSONFormatter())
     else:
          handler.setFormatter(logging.Formatter(
               "%(asctime)s %(levelname)s %(name)s: %(message)s",
          ))
     root = logging.getLogger()
     for existing in list(root.handlers):
          if getattr(existing, "_apartments_handler", False):
               root.removeHandler(existing)
     handler._apartments_handler = True
     root.addHandler(handler)
     root.setLevel(getattr(logging, level.upper(), logging.INFO))
