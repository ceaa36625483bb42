#!/usr/bin/env python3
"""
Error handling utilities for segchain.
Provides formatting and logging helpers for consistent error reporting.
"""
import traceback
import logging
from typing import Any, Dict, Optional

from .exceptions import SegChainError


def format_error(error: Exception, verbose: bool = False) -> str:
    """Format an error message for display

    Args:
        error: Exception object
        verbose: Whether to include detailed information

    Returns:
        Formatted error message
    """
    if isinstance(error, SegChainError):
        msg = f"{error.__class__.__name__}: {error.message}"
        if verbose and error.details:
            msg += f"\nDetails: {error.details}"
        return msg
    else:
        if verbose:
            return f"Unexpected Error ({error.__class__.__name__}): {str(error)}\n{traceback.format_exc()}"
        else:
            return f"Unexpected Error: {str(error)}"


def log_exception(logger: logging.Logger,
                  error: Exception,
                  level: int = logging.ERROR,
                  context: Optional[Dict[str, Any]] = None) -> None:
    """Log an exception with context

    Args:
        logger: Logger instance
        error: Exception object
        level: Logging level
        context: Additional context for the log
    """
    if isinstance(error, SegChainError):
        # Include any details from the error
        ctx = {**(error.details or {}), **(context or {})}
        logger.log(level, format_error(error),
                   extra={"context": ctx} if ctx else None,
                   exc_info=True)
    else:
        logger.log(level, f"Unexpected error: {str(error)}",
                   extra={"context": context} if context else None,
                   exc_info=True)
