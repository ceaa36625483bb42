# segchain/models/chain.py
"""
Ordered collection of segments

A Chain keeps its segments in non-decreasing (start, end) order, which the
sequence algorithms below rely on. Ordering is enforced on push; overlap
between neighbours is allowed but the intersection routines assume each
chain is internally non-overlapping.
"""

import logging
from functools import total_ordering
from typing import Iterable, Iterator, List, Optional, Tuple

from segchain.core.context import ApplicationContext
from segchain.exceptions import InvalidRangeError, OutOfOrderError
from segchain.models.base import RangeAlgebra
from segchain.models.segment import Segment
from segchain.utils.validation import validate_position

logger = logging.getLogger("segchain.models.chain")


@total_ordering
class Chain(RangeAlgebra):
    """Sorted sequence of Segments, e.g. the exon blocks of a transcript"""

    def __init__(self, segments: Optional[Iterable[Segment]] = None):
        """Create a chain, optionally pushing segments in order

        Args:
            segments: Segments to push, already sorted

        Raises:
            OutOfOrderError: If the segments are not sorted
        """
        self._segments: List[Segment] = []
        for segment in segments or ():
            self.push(segment)

    def push(self, segment: Segment) -> None:
        """Append a copy of segment

        Raises:
            TypeError: If segment is not a Segment
            OutOfOrderError: If segment sorts before the last segment
        """
        if not isinstance(segment, Segment):
            raise TypeError(f"Chain can only hold Segment, got {type(segment).__name__}")

        if self._segments and segment < self._segments[-1]:
            last = self._segments[-1]
            raise OutOfOrderError(
                f"segment {segment} sorts before last segment {last}",
                {"segment": segment.as_tuple(), "last": last.as_tuple()}
            )
        self._segments.append(segment.copy())

    def is_empty(self) -> bool:
        return not self._segments

    def empty(self) -> bool:
        return self.is_empty()

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Copies of the held segments"""
        return tuple(segment.copy() for segment in self._segments)

    @property
    def start(self) -> Optional[int]:
        """Start of the envelope, None for an empty chain"""
        if not self._segments:
            return None
        return self._segments[0].start

    @property
    def end(self) -> Optional[int]:
        """End of the envelope, None for an empty chain"""
        if not self._segments:
            return None
        return self._segments[-1].end

    @property
    def length(self) -> int:
        """Sum of the segment lengths"""
        return sum(segment.length for segment in self._segments)

    def contains(self, pos: int) -> bool:
        return any(segment.contains(pos) for segment in self._segments)

    def set_start(self, new_start: int) -> None:
        """Move the start of the chain

        Extends the first segment when new_start does not pass the current
        start. Otherwise drops every leading segment whose start is below
        new_start; a segment straddling new_start is dropped whole, not
        clipped, so the chain may end up empty.

        Raises:
            InvalidRangeError: If the chain is empty or new_start > end
        """
        new_start = validate_position(new_start, "start")
        if not self._segments:
            raise InvalidRangeError("cannot set start of an empty chain", {"start": new_start})
        if new_start > self.end:
            raise InvalidRangeError(
                f"start > end ({new_start} > {self.end})",
                {"start": new_start, "end": self.end}
            )

        if new_start <= self.start:
            self._segments[0].set_start(new_start)
            return

        keep = 0
        while keep < len(self._segments) and self._segments[keep].start < new_start:
            keep += 1
        logger.debug(f"set_start({new_start}) dropped {keep} leading segment(s)")
        self._segments = self._segments[keep:]

    def set_end(self, new_end: int) -> None:
        """Move the end of the chain

        Mirror of set_start: extends the last segment when new_end does not
        fall short of the current end, otherwise drops trailing segments
        while their end exceeds new_end.

        Raises:
            InvalidRangeError: If the chain is empty or new_end < start
        """
        new_end = validate_position(new_end, "end")
        if not self._segments:
            raise InvalidRangeError("cannot set end of an empty chain", {"end": new_end})
        if new_end < self.start:
            raise InvalidRangeError(
                f"start > end ({self.start} > {new_end})",
                {"start": self.start, "end": new_end}
            )

        if new_end >= self.end:
            self._segments[-1].set_end(new_end)
            return

        keep = len(self._segments)
        while keep > 0 and self._segments[keep - 1].end > new_end:
            keep -= 1
        logger.debug(f"set_end({new_end}) dropped {len(self._segments) - keep} trailing segment(s)")
        self._segments = self._segments[:keep]

    def intersect(self, other: RangeAlgebra) -> Optional['Chain']:
        """Positions shared with a Segment or another Chain

        Both chains must be internally non-overlapping; overlapping
        neighbours can yield an out-of-order result, which raises
        OutOfOrderError instead of returning.

        Returns:
            Chain of the pairwise intersections, or None if nothing is shared

        Raises:
            OutOfOrderError: If an operand holds overlapping segments and
                the pairwise intersections come out unsorted
        """
        if isinstance(other, Chain):
            result = self._intersect_chain(other)
        elif isinstance(other, Segment):
            result = self._intersect_segment(other)
        else:
            raise self._unsupported("intersect", other)

        return result if result._segments else None

    def _intersect_chain(self, other: 'Chain') -> 'Chain':
        # Two-pointer merge over both sorted lists
        result = Chain()
        i = j = 0
        while i < len(self._segments) and j < len(other._segments):
            seg1 = self._segments[i]
            seg2 = other._segments[j]

            shared = seg1.intersect(seg2)
            if shared is not None:
                result.push(shared)

            # ties advance the right-hand cursor
            if seg1.end < seg2.end:
                i += 1
            else:
                j += 1
        return result

    def _intersect_segment(self, other: Segment) -> 'Chain':
        result = Chain()
        for segment in self._segments:
            shared = segment.intersect(other)
            if shared is not None:
                result.push(shared)
            if segment.end >= other.end:
                break
        return result

    def union(self, other: RangeAlgebra, merge_adjacent: Optional[bool] = None) -> Optional['Chain']:
        """Merge with a Segment or Chain into a normalized, disjoint Chain

        Args:
            other: Segment or Chain
            merge_adjacent: Also join runs that touch without overlapping
                (5 followed by 6). Defaults to the algebra.merge_adjacent
                configuration value.

        Returns:
            Merged chain, or None when both operands are empty
        """
        if isinstance(other, Chain):
            pool = self._segments + other._segments
        elif isinstance(other, Segment):
            pool = self._segments + [other]
        else:
            raise self._unsupported("union", other)

        if not pool:
            return None

        if merge_adjacent is None:
            merge_adjacent = ApplicationContext().config.merge_adjacent()
        reach = 1 if merge_adjacent else 0

        ordered = sorted(pool)
        merged = [ordered[0].copy()]
        for segment in ordered[1:]:
            last = merged[-1]
            if segment.start <= last.end + reach:
                if segment.end > last.end:
                    last.set_end(segment.end)
            else:
                merged.append(segment.copy())

        logger.debug(f"union merged {len(pool)} segment(s) into {len(merged)}")
        return Chain(merged)

    def overlap(self, other: RangeAlgebra) -> bool:
        """Loose overlap

        Against a Segment the chain is treated as its envelope, so a segment
        sitting in a gap still counts. Against a Chain, true if any of our
        segments overlaps the other chain's envelope.
        """
        if isinstance(other, Segment):
            if not self._segments:
                return False
            return self.start <= other.end and other.start <= self.end
        if isinstance(other, Chain):
            return any(other.overlap(segment) for segment in self._segments)
        raise self._unsupported("overlap", other)

    def strict_overlap(self, other: RangeAlgebra) -> bool:
        """Element-wise overlap; gaps between segments never match"""
        if isinstance(other, Segment):
            return any(segment.overlap(other) for segment in self._segments)
        if isinstance(other, Chain):
            return any(other.strict_overlap(segment) for segment in self._segments)
        raise self._unsupported("strict_overlap", other)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step is not None and index.step <= 0:
                raise ValueError(f"Chain slices need a positive step, got {index.step}")
            return Chain(self._segments[index])
        return self._segments[index].copy()

    def __eq__(self, other):
        if isinstance(other, Chain):
            return self._segments == other._segments
        if isinstance(other, Segment):
            return len(self._segments) == 1 and self._segments[0] == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Chain):
            return self._segments < other._segments
        if isinstance(other, Segment):
            # an empty chain sorts before any segment
            if not self._segments:
                return True
            return self._segments[0] < other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Chain([{', '.join(repr(s) for s in self._segments)}])"

    def __str__(self) -> str:
        return ','.join(str(s) for s in self._segments)
