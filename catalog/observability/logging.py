"""
Structured logging for the pattern catalog.

Demos print their illustrative output to stdout, so everything logged here
goes to stderr (or a file) and never mixes with a demo's transcript.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

ROOT_LOGGER_NAME = "catalog"


class LogLevel(Enum):
    """Log levels for the catalog."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def __init__(self, include_timestamp: bool = True, pretty: bool = False) -> None:
        """Initialize the formatter.

        Args:
            include_timestamp: Whether to include timestamp in output
            pretty: Whether to pretty-print JSON output
        """
        super().__init__()
        self._include_timestamp = include_timestamp
        self._pretty = pretty

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if self._include_timestamp:
            log_data["timestamp"] = datetime.now().isoformat()

        if getattr(record, "demo_name", None):
            log_data["demo"] = getattr(record, "demo_name")
        if getattr(record, "session_id", None):
            log_data["session_id"] = getattr(record, "session_id")
        if getattr(record, "category", None):
            log_data["category"] = getattr(record, "category")
        if getattr(record, "duration_ms", None) is not None:
            log_data["duration_ms"] = getattr(record, "duration_ms")
        if getattr(record, "extra_data", None):
            log_data["data"] = getattr(record, "extra_data")

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        indent = 2 if self._pretty else None
        return json.dumps(log_data, indent=indent, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Formatter that outputs human-readable logs with context."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors in output
        """
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        context_parts: list[str] = []
        if getattr(record, "demo_name", None):
            context_parts.append(f"demo={getattr(record, 'demo_name')}")
        if getattr(record, "session_id", None):
            session_id = getattr(record, "session_id")
            context_parts.append(f"session={session_id[:8]}")
        if getattr(record, "category", None):
            context_parts.append(f"category={getattr(record, 'category')}")
        if getattr(record, "duration_ms", None) is not None:
            context_parts.append(f"duration={getattr(record, 'duration_ms')}ms")

        context = f" [{', '.join(context_parts)}]" if context_parts else ""

        if self._use_colors:
            color = self.COLORS.get(level, "")
            reset = self.COLORS["RESET"]
            level_str = f"{color}{level:8}{reset}"
        else:
            level_str = f"{level:8}"

        base = f"{timestamp} | {level_str} |{context} {record.getMessage()}"

        if record.exc_info:
            base += f"\n{self.formatException(record.exc_info)}"

        return base


class CatalogLogger:
    """Logger with context injection for catalog operations.

    Usage:
        logger = CatalogLogger("runner", session_id="abc123")
        logger.info("Demo finished", demo_name="observer", duration_ms=1.2)
        logger.error("Demo failed", exc_info=True)
    """

    def __init__(
        self,
        name: str,
        session_id: Optional[str] = None,
        demo_name: Optional[str] = None,
    ) -> None:
        """Initialize the catalog logger.

        Args:
            name: Logger name, nested under the ``catalog`` namespace
            session_id: Session identifier for correlation
            demo_name: Demo name for context
        """
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        self._session_id = session_id
        self._demo_name = demo_name

    @property
    def name(self) -> str:
        """Fully qualified name of the wrapped stdlib logger."""
        return self._logger.name

    def _log(
        self,
        level: int,
        message: str,
        demo_name: Optional[str] = None,
        category: Optional[str] = None,
        duration_ms: Optional[float] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        log_extra: Dict[str, Any] = {}

        if demo_name or self._demo_name:
            log_extra["demo_name"] = demo_name or self._demo_name
        if self._session_id:
            log_extra["session_id"] = self._session_id
        if category:
            log_extra["category"] = category
        if duration_ms is not None:
            log_extra["duration_ms"] = round(duration_ms, 2)
        if extra:
            log_extra["extra_data"] = extra

        self._logger.log(level, message, extra=log_extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)

    def with_context(
        self,
        demo_name: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> "CatalogLogger":
        """Create a new logger with additional context.

        Args:
            demo_name: Demo name to add
            session_id: Session ID to add

        Returns:
            New CatalogLogger with merged context
        """
        return CatalogLogger(
            name=self._logger.name[len(ROOT_LOGGER_NAME) + 1 :],
            session_id=session_id or self._session_id,
            demo_name=demo_name or self._demo_name,
        )


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    use_colors: bool = True,
    pretty_json: bool = False,
) -> None:
    """Configure logging for the catalog.

    Args:
        level: Minimum log level
        log_file: Optional file path for log output
        json_format: Whether to use JSON format (vs human-readable)
        use_colors: Whether to use colors in console output
        pretty_json: Whether to pretty-print JSON logs
    """
    if isinstance(level, str):
        try:
            level = LogLevel[level.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {level}") from exc

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.value)
    root_logger.handlers.clear()

    if json_format:
        formatter: logging.Formatter = StructuredFormatter(pretty=pretty_json)
    else:
        formatter = HumanReadableFormatter(use_colors=use_colors)

    # stderr, so demo output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (always JSON for easier parsing)
    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter(pretty=False))
        root_logger.addHandler(file_handler)


def get_logger(
    name: str,
    session_id: Optional[str] = None,
    demo_name: Optional[str] = None,
) -> CatalogLogger:
    """Get a catalog logger instance.

    Args:
        name: Logger name
        session_id: Optional session ID
        demo_name: Optional demo name

    Returns:
        Configured CatalogLogger instance
    """
    return CatalogLogger(name=name, session_id=session_id, demo_name=demo_name)
