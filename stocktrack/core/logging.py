import json
import logging
from datetime import datetime, timezone

from stocktrack.config import get_settings

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(level_name: str | None = None, json_output: bool | None = None) -> None:
    settings = get_settings()
    if level_name is None:
        level_name = settings.LOG_LEVEL
    if json_output is None:
        json_output = settings.LOG_JSON
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)


__all__ = ["JsonFormatter", "setup_logging"]
