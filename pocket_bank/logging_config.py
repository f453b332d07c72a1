"""
Structured Logging Configuration Module

Account operations log through the "pocket_bank" logger hierarchy. Records
may carry three structured fields, set through log_action():

- action: the operation name (deposit, withdraw, ...)
- resource: the account owner the operation resolved to
- details: a dict of outcome data (status, amount, balance)
"""

import logging
import json
from datetime import datetime, timezone
from typing import Optional

from .config import BankingConfig, get_config

ROOT_LOGGER = "pocket_bank"
STRUCTURED_FIELDS = ("action", "resource", "details")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line"""

    def format(self, record):
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in STRUCTURED_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO", logger_name: str = ROOT_LOGGER,
                  log_format: str = "json") -> logging.Logger:
    """
    Attach a single stream handler to logger_name

    Calling it again replaces the previous handler, so it is safe to
    reconfigure at runtime.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        logger_name: Logger to configure
        log_format: "json" or "text"
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = JSONFormatter() if log_format == "json" else logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def configure_logging(settings: Optional[BankingConfig] = None) -> logging.Logger:
    """Configure the package logger from log_level and log_format settings"""
    settings = settings or get_config()
    return setup_logging(settings.log_level, log_format=settings.log_format)


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


def log_action(logger: logging.Logger, level: str, message: str,
               action: Optional[str] = None, resource: Optional[str] = None,
               details: Optional[dict] = None):
    """Log message with the structured fields that JSONFormatter emits"""
    fields = {"action": action, "resource": resource, "details": details}
    logger.log(
        logging.getLevelName(level.upper()),
        message,
        extra={k: v for k, v in fields.items() if v}
    )
