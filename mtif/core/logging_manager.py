#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for the mtif conversion tools.

The parsing core never logs; this module is used by the file reader,
the YAML pipeline and the command line to record what was converted
and why a conversion failed.
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


LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

_FILE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
_CONSOLE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)


class MTIFLogger:
    """
    Rotating-file logger for one tool component.

    Operations go to ``<component>.log``, failures to ``errors.log``.
    Only warnings or worse reach the console.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for all operations
        error_logger: Dedicated logger for errors only
    """

    def __init__(self, log_dir: Path, component_name: str = "mtif") -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._file_logger(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger("errors", "errors.log", logging.ERROR)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(_CONSOLE_FORMAT)
        self.main_logger.addHandler(console_handler)

    def _file_logger(self, suffix: str, file_name: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # Drop handlers left by an earlier instance for the same component
        logger.handlers = []

        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(_FILE_FORMAT)
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Close and detach all handlers."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a completed step (file parsed, directory converted...).

        Args:
            operation: Name of the step
            details: JSON-serializable details; non-JSON values use str()
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record an error, its context and the active traceback in errors.log."""
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str) -> None:
        self.main_logger.debug(f"DEBUG - {message}")

    def log_info(self, message: str) -> None:
        self.main_logger.info(f"INFO - {message}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error and return the line to show on the terminal.

        Examples:
            >>> logger.log_cli_error(GrammarMismatchError("bad field", 3))
            '❌ GrammarMismatchError: bad field at offset 3'
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Report a failed command and exit with status 1.

    The error is logged through the logger stored on the click context
    and a one-line message is printed to stderr; with ``--verbose`` the
    traceback follows it.

    Args:
        ctx: Click context holding ``logger`` and ``verbose``
        error: Exception that stopped the command
        operation: Name of the failed command (e.g. 'convert', 'validate')
        additional_context: Extra context for the log (input path, ...)
    """
    logger: Optional[MTIFLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    click.echo(
        safe_logger(logger).log_cli_error(error, context, show_traceback=verbose),
        err=True,
    )
    sys.exit(1)


class NullLogger:
    """Stand-in used when a library function is called without a logger."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str) -> None:
        pass

    def log_info(self, message: str) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[MTIFLogger]) -> MTIFLogger:
    """
    Return the provided logger or a shared NullLogger if None.

    Usage:
        safe_logger(logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
