#!/usr/bin/env python3
"""
Range utilities module for segchain

Converts between segments/chains and explicit position arrays and
computes coverage between ranges.
"""

import logging
from typing import Iterable, Optional, Union

import numpy as np

from segchain.models.chain import Chain
from segchain.models.segment import Segment
from segchain.utils.validation import validate_position

logger = logging.getLogger("segchain.utils.range_utils")


def positions(obj: Union[Segment, Chain]) -> np.ndarray:
    """Every position covered by a Segment or Chain

    Args:
        obj: Segment or Chain

    Returns:
        Sorted, unique uint32 array of positions
    """
    if isinstance(obj, Segment):
        return np.arange(obj.start, obj.end + 1, dtype=np.uint32)
    if isinstance(obj, Chain):
        if obj.empty():
            return np.empty(0, dtype=np.uint32)
        parts = [np.arange(s.start, s.end + 1, dtype=np.uint32) for s in obj]
        return np.unique(np.concatenate(parts))
    raise TypeError(f"expected Segment or Chain, got {type(obj).__name__}")


def from_positions(values: Iterable[int]) -> Chain:
    """Coalesce positions into a chain of maximal consecutive runs

    Duplicates and ordering of the input do not matter.

    Args:
        values: Integer positions

    Returns:
        Normalized chain, empty when no positions are given
    """
    checked = [validate_position(v) for v in values]
    if not checked:
        return Chain()

    # int64 so the run detection below cannot wrap at the uint32 boundary
    sorted_positions = np.unique(np.asarray(checked, dtype=np.int64))

    breaks = np.nonzero(np.diff(sorted_positions) > 1)[0]
    run_starts = np.concatenate(([sorted_positions[0]], sorted_positions[breaks + 1]))
    run_ends = np.concatenate((sorted_positions[breaks], [sorted_positions[-1]]))

    chain = Chain()
    for start, end in zip(run_starts, run_ends):
        chain.push(Segment(int(start), int(end)))

    logger.debug(f"Coalesced {len(sorted_positions)} position(s) into {len(chain)} segment(s)")
    return chain


def coverage_fraction(target: Union[Segment, Chain], other: Union[Segment, Chain]) -> float:
    """Fraction of target's positions that other also covers

    Args:
        target: Range whose positions are counted
        other: Range tested for coverage

    Returns:
        Value between 0.0 and 1.0; 0.0 when target is empty
    """
    covered = _normalized(target)
    if covered is None:
        return 0.0

    reference = _normalized(other)
    if reference is None:
        return 0.0

    shared = covered.intersect(reference)
    shared_length = shared.length if shared is not None else 0
    return float(shared_length) / float(covered.length)


def _normalized(obj: Union[Segment, Chain]) -> Optional[Chain]:
    # disjoint form, so lengths count each position once
    if isinstance(obj, Segment):
        return Chain([obj])
    if isinstance(obj, Chain):
        return obj.union(Chain(), merge_adjacent=True)
    raise TypeError(f"expected Segment or Chain, got {type(obj).__name__}")
