#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Component logging for WebWeaver runs.

Every pipeline run gets a WeaverLogger writing rotating log files for the
component (all activity) and a shared errors log, with warnings mirrored
to the console. Library functions accept an optional logger and wrap it
with `safe_logger()` so they never need to check for None.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class WeaverLogger:
    """
    Structured logger for one WebWeaver component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component identifier, used as logger and file name
        main_logger: Logger for all activity (`<component>.log`)
        error_logger: Logger for errors only (`errors.log`)
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "webweaver",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name for the component logger (e.g. 'build')
            max_bytes: Size at which a log file is rotated (default: 5MB)
            backup_count: Rotated files kept per log (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"webweaver.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        # Only this component's handlers are replaced
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"webweaver.{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.propagate = False
        self.error_logger.handlers = []

        self._add_file_handler(
            self.main_logger, self.log_dir / f"{self.component_name}.log", logging.DEBUG
        )
        self._add_file_handler(self.error_logger, self.log_dir / "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _add_file_handler(self, logger: logging.Logger, file_path: Path, level: int) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    def close(self) -> None:
        """Close and detach all handlers (releases the log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    @staticmethod
    def _format(prefix: str, message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{prefix} - {message}: {json.dumps(details, default=str)}"
        return f"{prefix} - {message}"

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Log a pipeline step with its parameters or results.

        Args:
            operation: Step name (e.g. 'materialize_complete')
            details: Optional JSON-serializable details
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error, its context and the current traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional context (file, operation, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._format("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._format("INFO", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(self._format("WARNING", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log the full error to file and return a short message for the terminal.

        Args:
            error: Exception to report
            context: Where the error happened
            show_traceback: Append the traceback to the returned message

        Returns:
            Message such as '❌ InvalidDate: Invalid date prefix ...'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Logs the error through the logger stored on the click context, echoes
    a one-line message (with traceback when verbose) to stderr and exits.

    Args:
        ctx: Click context carrying 'logger' and 'verbose'
        error: Exception that aborted the command
        operation: Command name, recorded in the log context
        additional_context: Extra context (input path, output root, ...)
        exit_code: Process exit code (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[WeaverLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Logger with the WeaverLogger interface that discards everything."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[WeaverLogger]) -> WeaverLogger:
    """
    Return the given logger, or the shared NullLogger when it is None.

    Usage:
        safe_logger(logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
