#!/usr/bin/env python3

"""Logging infrastructure for the application."""

from .logger_setup import LoggerSetup
from .utils import get_logger, log_timing

__all__ = [
    "LoggerSetup",
    "get_logger",
    "log_timing",
]
