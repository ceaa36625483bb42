#!/usr/bin/env python3
"""
Exception hierarchy for segchain.
All custom exceptions should inherit from SegChainError.
"""
from typing import Dict, Any, Optional


class SegChainError(Exception):
    """Base exception for all segchain errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(SegChainError):
    """Error related to configuration issues"""
    pass


class ValidationError(SegChainError):
    """Data validation error"""
    pass


class InvalidRangeError(ValidationError):
    """A bound would leave start > end, or lies outside the position space"""
    pass


class OutOfOrderError(ValidationError):
    """A segment pushed onto a chain sorts before the chain's last segment"""
    pass
