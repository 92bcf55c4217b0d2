"""Logging module for Vibera."""

from .logger import ContextLogger, get_logger, setup_app_logging, setup_logging

__all__ = ["ContextLogger", "get_logger", "setup_app_logging", "setup_logging"]
