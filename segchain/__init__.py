#!/usr/bin/env python3
"""
segchain - interval algebra over unsigned 32-bit positions

Segment is a single closed range; Chain is an ordered collection of
segments such as the exon blocks of a transcript.
"""

__version__ = '0.1.0'
__license__ = 'MIT'

from .exceptions import SegChainError, ValidationError, InvalidRangeError, OutOfOrderError, ConfigurationError
from .models import Segment, Chain
from .utils.validation import POSITION_MAX
from .utils.range_utils import positions, from_positions, coverage_fraction

__all__ = [
    'Segment', 'Chain', 'POSITION_MAX', 'positions', 'from_positions', 'coverage_fraction',
    'SegChainError', 'ValidationError', 'InvalidRangeError', 'OutOfOrderError', 'ConfigurationError',
]
