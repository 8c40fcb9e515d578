"""
logger.py - Logging for the asset combiner.

Records may carry asset fields through ``extra=``:

    logger.info("Served", extra={"asset_type": "css", "asset_key": key,
                                 "source": "cache", "status": 200})

Both handlers render whichever of them are present, so a served request
can be traced to its cache entry from either the log file or the console.
"""
import os
import logging
import logging.handlers
from datetime import datetime, timezone

LOGGER_NAME = "combiner"

ASSET_FIELDS = ("asset_type", "asset_key", "source", "status", "files")

_initialized = False


def asset_fields(record):
    """The asset fields set on ``record``, in ASSET_FIELDS order."""
    found = {}
    for name in ASSET_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            found[name] = value
    return found


def asset_extra(result, status=None, files=None):
    """Build the ``extra`` mapping for an AssetResult."""
    extra = {
        "asset_type": result.asset_type.value,
        "asset_key": result.key,
        "source": result.source,
        "status": status,
    }
    if files is not None:
        extra["files"] = len(files)
    return extra


class StructuredFormatter(logging.Formatter):
    """One ``key=value | ...`` line per record, for the rotating log file."""

    def format(self, record):
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(asset_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return " | ".join(f"{k}={v}" for k, v in entry.items())


class ConsoleFormatter(logging.Formatter):
    """Human readable line with the asset fields appended in brackets."""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)s] %(message)s")

    def format(self, record):
        line = super().format(record)
        fields = asset_fields(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        return line


def setup_logging(log_dir="logs", log_level="INFO", console=True):
    """
    Configure the ``combiner`` logger once per process.

    ``log_dir=None`` skips the file handler (tests, CLI). The file rotates at
    midnight and keeps 30 days.
    """
    global _initialized
    logger = logging.getLogger(LOGGER_NAME)
    if _initialized:
        return logger

    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            os.path.join(log_dir, "combiner.log"),
            when="midnight", backupCount=30, encoding="utf-8",
        )
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(ConsoleFormatter())
        logger.addHandler(stream)

    _initialized = True
    logger.info(f"Logging initialised (level={log_level}, dir={log_dir or '-'})")
    return logger
