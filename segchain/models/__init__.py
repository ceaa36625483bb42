"""Interval models: Segment and Chain"""

from .base import RangeAlgebra
from .segment import Segment
from .chain import Chain

__all__ = ['RangeAlgebra', 'Segment', 'Chain']
