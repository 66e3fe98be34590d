"""Structured logging module with JSON output support."""

import json
import sys
import traceback
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from src.utils.config import config

_LEVEL_ORDER = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class StructuredLogger:
    """Logger that outputs JSON-formatted log entries."""

    def __init__(
        self,
        component: str,
        file_path: str | None = None,
        min_level: str | None = None,
    ):
        """
        Initialize the structured logger.

        Args:
            component: Name of the component using this logger
            file_path: Optional path to write logs to file (defaults to LOG_FILE)
            min_level: Entries below this level are dropped (defaults to LOG_LEVEL)
        """
        self.component = component
        self.file_path = file_path if file_path is not None else config.logging.file_path
        self.min_level = (min_level or config.logging.level).upper()
        if self.file_path:
            Path(self.file_path).parent.mkdir(parents=True, exist_ok=True)

    def is_enabled_for(self, level: str) -> bool:
        """Check whether entries at the given level are written."""
        return _LEVEL_ORDER.get(level, 20) >= _LEVEL_ORDER.get(self.min_level, 20)

    def _format_log_entry(
        self,
        level: str,
        message: str,
        context: dict[str, Any] | None = None,
        exception: dict[str, Any] | None = None,
    ) -> str:
        """
        Format a log entry as JSON.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            message: Log message
            context: Optional context fields
            exception: Optional exception details

        Returns:
            JSON-formatted log entry
        """
        entry = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": level,
            "component": self.component,
            "message": message,
        }

        if context:
            entry["context"] = context

        if exception:
            entry["exception"] = exception

        return json.dumps(entry, default=str)

    @staticmethod
    def _exception_details(exception: Exception | None) -> dict[str, Any] | None:
        if exception is None:
            return None
        return {
            "type": type(exception).__name__,
            "message": str(exception),
            "stack_trace": "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            ),
        }

    def _write_log(self, log_entry: str) -> None:
        """Write log entry to stdout and optional file."""
        try:
            print(log_entry, file=sys.stdout)
            if self.file_path:
                with open(self.file_path, "a") as f:
                    f.write(log_entry + "\n")
        except Exception as e:
            print(f"Failed to write log: {e}", file=sys.stderr)

    def _emit(
        self,
        level: str,
        message: str,
        context: dict[str, Any] | None = None,
        exception: Exception | None = None,
    ) -> None:
        if not self.is_enabled_for(level):
            return
        log_entry = self._format_log_entry(
            level, message, context, self._exception_details(exception)
        )
        self._write_log(log_entry)

    def debug(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Log a debug message."""
        self._emit("DEBUG", message, context)

    def info(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Log an info message."""
        self._emit("INFO", message, context)

    def warning(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        exception: Exception | None = None,
    ) -> None:
        """Log a warning message with optional exception details."""
        self._emit("WARNING", message, context, exception)

    def error(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        exception: Exception | None = None,
    ) -> None:
        """Log an error message with optional exception details."""
        self._emit("ERROR", message, context, exception)

    def critical(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        exception: Exception | None = None,
    ) -> None:
        """Log a critical message with optional exception details."""
        self._emit("CRITICAL", message, context, exception)
