"""
Centralized logging configuration for ServiceDesk.

Call setup_logging() once at application startup. Modules log through
logging.getLogger(__name__) and inherit the root handlers set up here.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from contextvars import ContextVar

# ── Context variable for request correlation ──
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Attributes the request middleware attaches through `extra=`
EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip")

NOISY_LOGGERS = ("uvicorn.access", "pymongo", "motor", "asyncio", "watchfiles", "httpx", "httpcore")


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get("-")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log files and aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": get_request_id(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update({key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)})
        return json.dumps(entry, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """
    Human-readable console output.

    Format: [HH:MM:SS] LEVEL    logger — message  [req:id]
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        # servicedesk.controllers.category_controller → category_controller
        name = record.name.rsplit(".", 1)[-1] if record.name.count(".") > 1 else record.name

        req_id = get_request_id()
        req_tag = f" {self.DIM}[req:{req_id[:8]}]{self.RESET}" if req_id != "-" else ""

        line = (
            f"{self.DIM}[{time_str}]{self.RESET} "
            f"{color}{record.levelname:<8}{self.RESET} "
            f"{name} — {record.getMessage()}{req_tag}"
        )
        if record.exc_info and record.exc_info[0] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _file_handler(path: Path, level: int, log_json: bool, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=str(path),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_json else logging.Formatter(PLAIN_FORMAT))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path = Path("./logs"),
    log_json: bool = True,
) -> None:
    """
    Configure the root logger with console and rotating file handlers.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for log files.
        log_json: Whether to write JSON to log files.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColoredFormatter())
    root.addHandler(console)

    root.addHandler(_file_handler(log_dir / "servicedesk.log", level, log_json, backup_count=5))
    root.addHandler(_file_handler(log_dir / "servicedesk.error.log", logging.ERROR, log_json, backup_count=3))

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("servicedesk").info(
        f"Logging configured: level={log_level}, dir={log_dir}, json={log_json}"
    )
