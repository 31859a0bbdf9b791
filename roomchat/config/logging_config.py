import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from roomchat.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

# Context variable to store correlation ID across async boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Keep third-party loggers quiet

    # App factory may run several times per process (tests)
    if not any(getattr(h, "_roomchat", False) for h in root.handlers):
        formatter = SafeFormatter(Config.LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.addFilter(CorrelationIdFilter())
        stream_handler._roomchat = True
        root.addHandler(stream_handler)

        # Set up file logging if log_file provided with rotation
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(formatter)
            file_handler.addFilter(CorrelationIdFilter())
            file_handler._roomchat = True
            root.addHandler(file_handler)

    logging.getLogger("roomchat").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("roomchat").info("Logging is set up.")

    return root
