"""Logging del proceso.

Por qué un módulo propio:
- La CLI configura el logging una sola vez a partir de `AppSettings`
  (`log_level`, `log_json`); el resto del código solo pide un logger.
- Los logs van a stderr para no mezclarse con la tabla Rich de stdout.
- httpx registra cada request en INFO; se limita a WARNING salvo en DEBUG.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """Una línea JSON por evento (pipelines/CI)."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str = "WARNING", json_logs: bool = False, force: bool = True) -> None:
    """Configura el logger raíz.

    Con `force=False` respeta una configuración previa (tests, hosts que
    embeben el controlador).
    """

    if not force and logging.getLogger().handlers:
        return

    level = level.upper()
    transport_level = "DEBUG" if level == "DEBUG" else "WARNING"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "httpx": {"level": transport_level},
                "httpcore": {"level": transport_level},
            },
            "root": {"handlers": ["stderr"], "level": level},
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
