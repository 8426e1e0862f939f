import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from form3_client.config.settings import settings

LOGGER_NAME = "form3_client"

FORMATS = {
    "default": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
}

# Libraries whose records are routed through our handlers, with their floor level.
THIRD_PARTY_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def _file_handler(log_file: str, level: str) -> Dict[str, Any]:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": str(path),
        "maxBytes": 10 * 1024 * 1024,
        "backupCount": 5,
        "formatter": "detailed",
        "level": level,
    }


def build_logging_config(level: str, log_file: Optional[str] = None) -> Dict[str, Any]:
    """Return the ``dictConfig`` mapping for the client's loggers."""
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "default",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = _file_handler(log_file, level)

    handler_names = list(handlers)
    loggers = {LOGGER_NAME: {"level": level, "handlers": handler_names, "propagate": False}}
    for name, floor in THIRD_PARTY_LEVELS.items():
        loggers[name] = {"level": floor, "handlers": handler_names, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            name: {"format": fmt, "datefmt": "%Y-%m-%d %H:%M:%S"}
            for name, fmt in FORMATS.items()
        },
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the client's loggers.

    The level defaults to ``settings.log_level`` (``FORM3_LOG_LEVEL``). The root
    logger is left alone so applications embedding the client keep their own
    configuration.
    """
    level = (log_level or settings.log_level).upper()
    logging.config.dictConfig(build_logging_config(level, log_file))


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the client's root logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def mask_sensitive_data(data: str, visible: int = 4) -> str:
    """Mask all but the first and last ``visible`` characters of a value."""
    if not data:
        return ""
    if len(data) <= visible * 2:
        return "*" * len(data)

    hidden = len(data) - visible * 2
    return data[:visible] + "*" * hidden + data[-visible:]
