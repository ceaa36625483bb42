# segchain/models/base.py

from typing import Optional


class RangeAlgebra:
    """Interface shared by Segment and Chain

    Every binary operation accepts either a Segment or a Chain as the
    right-hand operand; implementations dispatch on the operand type and
    raise TypeError for anything else.
    """

    @property
    def start(self) -> Optional[int]:
        raise NotImplementedError("Subclasses must implement start")

    @property
    def end(self) -> Optional[int]:
        raise NotImplementedError("Subclasses must implement end")

    @property
    def length(self) -> int:
        raise NotImplementedError("Subclasses must implement length")

    def empty(self) -> bool:
        raise NotImplementedError("Subclasses must implement empty")

    def contains(self, pos: int) -> bool:
        """True if pos falls inside the covered positions"""
        raise NotImplementedError("Subclasses must implement contains")

    def set_start(self, new_start: int) -> None:
        raise NotImplementedError("Subclasses must implement set_start")

    def set_end(self, new_end: int) -> None:
        raise NotImplementedError("Subclasses must implement set_end")

    def intersect(self, other: 'RangeAlgebra') -> Optional['RangeAlgebra']:
        """Shared positions, or None when there are none"""
        raise NotImplementedError("Subclasses must implement intersect")

    def union(self, other: 'RangeAlgebra') -> Optional['RangeAlgebra']:
        raise NotImplementedError("Subclasses must implement union")

    def overlap(self, other: 'RangeAlgebra') -> bool:
        """Loose overlap: chains are compared through their envelope"""
        raise NotImplementedError("Subclasses must implement overlap")

    def strict_overlap(self, other: 'RangeAlgebra') -> bool:
        """Element-wise overlap: gaps inside a chain are respected"""
        raise NotImplementedError("Subclasses must implement strict_overlap")

    def _unsupported(self, op: str, other: object) -> TypeError:
        return TypeError(
            f"unsupported operand for {type(self).__name__}.{op}: {type(other).__name__}"
        )
