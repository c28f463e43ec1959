import logging
import sys
import time

from pythonjsonlogger.json import JsonFormatter

REDACTED = "[REDACTED]"
SENSITIVE_FIELDS = frozenset({"shared_secret", "secret", "password", "otc", "token"})


class UTCJsonFormatter(JsonFormatter):
    converter = time.gmtime


class RedactSensitiveFields(logging.Filter):
    """Masks structured ``extra`` fields that may carry credentials."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SENSITIVE_FIELDS:
            if getattr(record, name, None):
                setattr(record, name, REDACTED)
        return True


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(UTCJsonFormatter(fmt))
    handler.addFilter(RedactSensitiveFields())
    root.addHandler(handler)

    # httpx logs full request URLs at INFO
    logging.getLogger("httpx").setLevel("WARNING")
