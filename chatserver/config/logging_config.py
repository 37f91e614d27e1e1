import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from chatserver.config.settings import Config

NO_REQUEST_ID = "-"
ANONYMOUS = "-"

# Context variables carried across async/thread boundaries for the current request
request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)
user_id_var: ContextVar[str] = ContextVar("user_id", default=ANONYMOUS)


class RequestContextFilter(logging.Filter):
    """Logging filter to add the request id and authenticated user to log records."""

    def filter(self, record):
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures the request context fields always exist."""

    def format(self, record):
        if not hasattr(record, "request_id"):
            record.request_id = NO_REQUEST_ID
        if not hasattr(record, "user_id"):
            record.user_id = ANONYMOUS
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: str | None = None, fmt: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # keep third-party libraries quiet

    formatter = SafeFormatter(fmt or Config.LOG_FORMAT)
    context_filter = RequestContextFilter()

    # setup_logging may run more than once (tests build several apps)
    for handler in list(root.handlers):
        if getattr(handler, "_chatserver", False):
            root.removeHandler(handler)

    logger_handler = logging.StreamHandler(sys.stdout)
    logger_handler.setFormatter(formatter)
    logger_handler.addFilter(context_filter)
    logger_handler._chatserver = True
    root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        file_handler._chatserver = True
        root.addHandler(file_handler)

    logging.getLogger("chatserver").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger(__name__).info("Logging is set up.")

    return root
