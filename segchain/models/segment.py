# segchain/models/segment.py
"""Closed integer interval over uint32 positions"""

from functools import total_ordering
from typing import Optional, Tuple

from segchain.exceptions import InvalidRangeError
from segchain.models.base import RangeAlgebra
from segchain.utils.validation import validate_bounds, validate_position


@total_ordering
class Segment(RangeAlgebra):
    """A single closed range [start, end]

    Segments order lexicographically on (start, end). They are mutable
    through set_start/set_end and therefore unhashable.
    """

    def __init__(self, start: int, end: int):
        """Create a segment

        Args:
            start: First covered position
            end: Last covered position (inclusive)

        Raises:
            InvalidRangeError: If start > end or a bound is outside uint32
        """
        self._start, self._end = validate_bounds(start, end)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def length(self) -> int:
        """Number of covered positions, end - start + 1"""
        return self._end - self._start + 1

    def empty(self) -> bool:
        return False

    def as_tuple(self) -> Tuple[int, int]:
        return (self._start, self._end)

    def copy(self) -> 'Segment':
        return Segment(self._start, self._end)

    def contains(self, pos: int) -> bool:
        return self._start <= pos <= self._end

    def set_start(self, new_start: int) -> None:
        """Move the start bound

        Raises:
            InvalidRangeError: If new_start > end
        """
        new_start = validate_position(new_start, "start")
        if new_start > self._end:
            raise InvalidRangeError(
                f"start > end ({new_start} > {self._end})",
                {"start": new_start, "end": self._end}
            )
        self._start = new_start

    def set_end(self, new_end: int) -> None:
        """Move the end bound

        Raises:
            InvalidRangeError: If new_end < start
        """
        new_end = validate_position(new_end, "end")
        if new_end < self._start:
            raise InvalidRangeError(
                f"start > end ({self._start} > {new_end})",
                {"start": self._start, "end": new_end}
            )
        self._end = new_end

    def intersect(self, other: RangeAlgebra) -> Optional[RangeAlgebra]:
        """Shared positions with a Segment (-> Segment) or a Chain (-> Chain)

        Returns None when nothing is shared.
        """
        if isinstance(other, Segment):
            start = max(self._start, other._start)
            end = min(self._end, other._end)
            if start > end:
                return None
            return Segment(start, end)
        if _is_chain(other):
            return other.intersect(self)
        raise self._unsupported("intersect", other)

    def union(self, other: RangeAlgebra) -> Optional[RangeAlgebra]:
        """Spanning segment for an overlapping Segment, None when disjoint

        A Chain operand yields the merged Chain, as Chain.union does.
        """
        if isinstance(other, Segment):
            if not self.overlap(other):
                return None
            return Segment(min(self._start, other._start), max(self._end, other._end))
        if _is_chain(other):
            return other.union(self)
        raise self._unsupported("union", other)

    def overlap(self, other: RangeAlgebra) -> bool:
        if isinstance(other, Segment):
            # touching endpoints count
            return self._start <= other._end and other._start <= self._end
        if _is_chain(other):
            return other.overlap(self)
        raise self._unsupported("overlap", other)

    def strict_overlap(self, other: RangeAlgebra) -> bool:
        if isinstance(other, Segment):
            return self.overlap(other)
        if _is_chain(other):
            return other.strict_overlap(self)
        raise self._unsupported("strict_overlap", other)

    def __eq__(self, other):
        if isinstance(other, Segment):
            return self.as_tuple() == other.as_tuple()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Segment):
            return self.as_tuple() < other.as_tuple()
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Segment({self._start}, {self._end})"

    def __str__(self) -> str:
        return f"{self._start}-{self._end}"


def _is_chain(obj: object) -> bool:
    from segchain.models.chain import Chain
    return isinstance(obj, Chain)
