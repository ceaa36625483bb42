#!/usr/bin/env python3
"""
Validation utilities for segchain
Functions for validating positions and bounds
"""
import logging
from typing import Any

import numpy as np

from ..exceptions import InvalidRangeError

logger = logging.getLogger("segchain.utils.validation")

POSITION_MIN = int(np.iinfo(np.uint32).min)
POSITION_MAX = int(np.iinfo(np.uint32).max)


def validate_position(value: Any, name: str = "position") -> int:
    """Validate a single coordinate

    Args:
        value: Candidate position
        name: Name used in error messages

    Returns:
        The position as a plain int

    Raises:
        TypeError: If value is not an integer
        InvalidRangeError: If value lies outside the uint32 position space
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    value = int(value)
    if value < POSITION_MIN or value > POSITION_MAX:
        raise InvalidRangeError(
            f"{name} {value} outside position range {POSITION_MIN}-{POSITION_MAX}",
            {name: value}
        )
    return value


def validate_bounds(start: Any, end: Any) -> tuple:
    """Validate a start/end pair, returning both as ints

    Raises:
        InvalidRangeError: If start > end or either bound is out of range
    """
    start = validate_position(start, "start")
    end = validate_position(end, "end")
    if start > end:
        raise InvalidRangeError(f"start > end ({start} > {end})", {"start": start, "end": end})
    return start, end
