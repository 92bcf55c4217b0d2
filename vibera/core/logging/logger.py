"""
Rich-based logger with bot and user context support for Vibera.

Provides context-aware logging where every message is prefixed with the bot
it was emitted for and, when known, the Viber user it concerns.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from vibera.core.config.settings import settings


class CompactFormatter(logging.Formatter):
    """Custom formatter that shortens long module names for better readability."""

    def format(self, record):
        if record.name.startswith("vibera."):
            # vibera.messaging.viber.client.viber_client -> viber.client
            parts = record.name.split(".")
            if len(parts) > 2:
                if "viber" in parts:
                    relevant_parts = [p for p in parts if p in ["viber", "client"]]
                    record.name = ".".join(relevant_parts[-2:])
                else:
                    record.name = ".".join(parts[-2:])

        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme, stderr=True)


class ContextLogger:
    """
    Logger wrapper that adds bot and user context to messages.

    Context is added as a message prefix so the format string of the
    underlying handlers does not depend on custom record fields.
    """

    def __init__(
        self,
        logger: logging.Logger,
        bot: str | None = None,
        user_id: str | None = None,
    ):
        self.logger = logger
        self.bot = bot or "---"
        self.user_id = user_id or "---"

    def _format_message(self, message: str) -> str:
        """Add context prefix to message."""
        if self.bot != "---":
            if self.user_id != "---":
                return f"[B:{self.bot}][U:{self.user_id}] {message}"
            return f"[B:{self.bot}] {message}"
        elif self.user_id != "---":
            return f"[U:{self.user_id}] {message}"
        return message

    def debug(self, message: str, *args, **kwargs) -> None:
        """Log debug message with context."""
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        """Log info message with context."""
        self.logger.info(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        """Log error message with context."""
        self.logger.error(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Returns a new instance rather than modifying the current one.

        Args:
            **kwargs: Context fields to bind:
                - bot: Override or set the bot name
                - user_id: Override or set the Viber user identifier

        Example:
            send_logger = logger.bind(user_id="01234567890A=")
        """
        new_bot = kwargs.get("bot", self.bot)
        new_user_id = kwargs.get("user_id", self.user_id)
        return ContextLogger(self.logger, bot=new_bot, user_id=new_user_id)


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"vibera_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)
    logging.getLogger("ViberaLoggerSetup").debug("Logging initialized (%s)", lvl)


def setup_app_logging() -> None:
    """Initialize logging from the environment settings."""
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str, **context: str) -> ContextLogger:
    """
    Get a context logger for a module.

    Args:
        name: Logger name (usually __name__)
        **context: Optional ``bot`` / ``user_id`` to bind right away

    Returns:
        ContextLogger instance
    """
    return ContextLogger(logging.getLogger(name)).bind(**context)
