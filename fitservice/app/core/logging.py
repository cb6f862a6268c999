import json
import logging
import sys
from datetime import datetime, timezone

# request attributes passed through `extra=` that end up in the JSON line
EXTRA_FIELDS = ("points", "transform", "status")
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

class JsonFormatter(logging.Formatter):
    def __init__(self, service: str = "fitservice"):
        super().__init__()
        self.service = service

    def format(self, record):
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({k: getattr(record, k) for k in EXTRA_FIELDS if hasattr(record, k)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)

def configure_logging(level=logging.INFO, service: str = "fitservice"):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(service))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    # uvicorn attaches plain-text handlers of its own; send its records to root
    for name in UVICORN_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
    return handler
