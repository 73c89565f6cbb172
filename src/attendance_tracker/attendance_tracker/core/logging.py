from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname


def setup_logging(level: str = "INFO", *, json_logs: bool = False) -> None:
    """Configure the root logger once for the app (idempotent)."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_attendance_tracker", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._attendance_tracker = True  # type: ignore[attr-defined]
    if json_logs:
        handler.setFormatter(CustomJsonFormatter("%(timestamp) %(level) %(name) %(message)"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
