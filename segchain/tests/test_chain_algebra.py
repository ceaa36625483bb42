#!/usr/bin/env python3
"""
Tests for Chain intersection, union and overlap
"""

import pytest

from segchain.core.context import ApplicationContext
from segchain.exceptions import OutOfOrderError
from segchain.models import Chain, Segment
from segchain.utils.validation import POSITION_MAX


def bounds(chain):
    return [s.as_tuple() for s in chain]


class TestChainIntersectChain:
    """Two-pointer merge intersection"""

    @pytest.mark.unit
    def test_intersect_chain_non_empty(self, exon_chain, make_chain):
        other = make_chain((5, 12), (18, 22), (30, 35))
        result = exon_chain.intersect(other)
        assert result == make_chain((5, 5), (10, 12), (20, 22))

    @pytest.mark.unit
    def test_intersect_chain_empty(self, exon_chain, make_chain):
        assert exon_chain.intersect(make_chain((30, 35), (40, 45))) is None

    @pytest.mark.unit
    def test_intersect_with_empty_chain(self, exon_chain):
        assert exon_chain.intersect(Chain()) is None
        assert Chain().intersect(exon_chain) is None

    @pytest.mark.unit
    def test_intersect_is_symmetric(self, exon_chain, make_chain):
        other = make_chain((0, 2), (4, 11), (14, 21), (24, 40))
        assert exon_chain.intersect(other) == other.intersect(exon_chain)

    @pytest.mark.unit
    def test_result_is_sorted(self, exon_chain, make_chain):
        other = make_chain((0, 2), (4, 11), (14, 21), (24, 40))
        result = exon_chain.intersect(other)
        assert bounds(result) == [(1, 2), (4, 5), (10, 11), (14, 15), (20, 21), (24, 25)]
        assert bounds(result) == sorted(bounds(result))

    @pytest.mark.unit
    def test_equal_ends_advance_right_cursor(self, make_chain):
        """On a tie the left segment is intersected again with the next right one"""
        left = make_chain((1, 10))
        right = make_chain((1, 10), (10, 12))
        assert bounds(left.intersect(right)) == [(1, 10), (10, 10)]

        left = make_chain((1, 10), (12, 14))
        right = make_chain((5, 10), (11, 13))
        assert bounds(left.intersect(right)) == [(5, 10), (12, 13)]

    @pytest.mark.unit
    def test_overlapping_operand_raises_out_of_order(self, make_chain):
        """(3, 10) is pushed before (3, 8) when the left chain overlaps itself"""
        left = make_chain((1, 10), (2, 8))
        right = make_chain((1, 1), (3, 20))
        with pytest.raises(OutOfOrderError):
            left.intersect(right)

    @pytest.mark.unit
    def test_intersect_with_self(self, exon_chain):
        assert exon_chain.intersect(exon_chain) == exon_chain

    @pytest.mark.unit
    def test_operands_unchanged(self, exon_chain, make_chain):
        other = make_chain((5, 12))
        exon_chain.intersect(other)
        assert bounds(exon_chain) == [(1, 5), (10, 15), (20, 25)]
        assert bounds(other) == [(5, 12)]


class TestChainIntersectSegment:

    @pytest.mark.unit
    def test_intersect_seg_non_empty(self, exon_chain, make_chain):
        result = exon_chain.intersect(Segment(3, 14))
        assert result == make_chain((3, 5), (10, 14))

    @pytest.mark.unit
    def test_intersect_seg_in_gap(self, exon_chain):
        assert exon_chain.intersect(Segment(6, 9)) is None

    @pytest.mark.unit
    def test_intersect_seg_covering_everything(self, exon_chain):
        assert exon_chain.intersect(Segment(0, 100)) == exon_chain

    @pytest.mark.unit
    def test_intersect_seg_stops_at_boundary_segment(self, make_chain):
        """The sweep stops after the first segment reaching other.end"""
        chain = make_chain((1, 20), (5, 8))
        assert bounds(chain.intersect(Segment(6, 10))) == [(6, 10)]

    @pytest.mark.unit
    def test_intersect_empty_chain(self):
        assert Chain().intersect(Segment(1, 5)) is None

    @pytest.mark.unit
    def test_unsupported_operand(self, exon_chain):
        with pytest.raises(TypeError):
            exon_chain.intersect([Segment(1, 2)])


class TestChainUnion:

    @pytest.mark.unit
    def test_union_chain(self, exon_chain, make_chain):
        result = exon_chain.union(make_chain((4, 11), (30, 35)))
        assert bounds(result) == [(1, 15), (20, 25), (30, 35)]

    @pytest.mark.unit
    def test_union_segment(self, exon_chain):
        assert bounds(exon_chain.union(Segment(14, 21))) == [(1, 5), (10, 25)]
        assert bounds(exon_chain.union(Segment(40, 41))) == [(1, 5), (10, 15), (20, 25), (40, 41)]

    @pytest.mark.unit
    def test_union_merges_adjacent_by_default(self, make_chain):
        result = make_chain((1, 5)).union(make_chain((6, 9)))
        assert bounds(result) == [(1, 9)]

    @pytest.mark.unit
    def test_union_keeps_adjacent_when_disabled(self, make_chain):
        result = make_chain((1, 5)).union(make_chain((6, 9)), merge_adjacent=False)
        assert bounds(result) == [(1, 5), (6, 9)]

    @pytest.mark.unit
    def test_union_default_from_configuration(self, make_chain, monkeypatch):
        monkeypatch.setenv("SEGCHAIN_ALGEBRA__MERGE_ADJACENT", "false")
        ApplicationContext.reset()
        result = make_chain((1, 5)).union(make_chain((6, 9)))
        assert bounds(result) == [(1, 5), (6, 9)]

    @pytest.mark.unit
    def test_union_normalizes_overlapping_input(self, make_chain):
        chain = make_chain((1, 10), (2, 3), (8, 12))
        assert bounds(chain.union(Chain())) == [(1, 12)]

    @pytest.mark.unit
    def test_union_of_empty_chains(self):
        assert Chain().union(Chain()) is None
        assert bounds(Chain().union(Segment(3, 4))) == [(3, 4)]

    @pytest.mark.unit
    def test_union_at_position_limit(self, make_chain):
        chain = make_chain((POSITION_MAX - 5, POSITION_MAX))
        result = chain.union(Segment(POSITION_MAX, POSITION_MAX))
        assert bounds(result) == [(POSITION_MAX - 5, POSITION_MAX)]

    @pytest.mark.unit
    def test_union_is_commutative(self, exon_chain, make_chain):
        other = make_chain((4, 11), (30, 35))
        assert exon_chain.union(other) == other.union(exon_chain)


class TestChainOverlap:
    """Loose (envelope) versus strict (element-wise) overlap"""

    @pytest.mark.unit
    def test_overlap_seg(self, exon_chain):
        assert exon_chain.overlap(Segment(1, 10))
        assert exon_chain.overlap(Segment(7, 9))
        assert exon_chain.overlap(Segment(25, 29))
        assert not exon_chain.overlap(Segment(26, 29))

    @pytest.mark.unit
    def test_overlap_chain(self, exon_chain, make_chain):
        assert exon_chain.overlap(make_chain((4, 7), (17, 23)))
        assert exon_chain.overlap(make_chain((7, 9), (16, 18), (26, 29)))
        assert not exon_chain.overlap(make_chain((26, 30)))

    @pytest.mark.unit
    def test_strict_overlap_seg(self, make_chain):
        chain = make_chain((2, 5), (10, 15), (20, 25))
        assert chain.strict_overlap(Segment(1, 10))
        assert not chain.strict_overlap(Segment(7, 9))
        assert chain.strict_overlap(Segment(25, 29))
        assert chain.strict_overlap(Segment(1, 30))
        assert not chain.strict_overlap(Segment(26, 29))

    @pytest.mark.unit
    def test_strict_overlap_chain(self, exon_chain, make_chain):
        assert exon_chain.strict_overlap(make_chain((4, 7), (17, 23)))
        assert not exon_chain.strict_overlap(make_chain((7, 9), (16, 18), (26, 29)))
        assert not exon_chain.strict_overlap(make_chain((26, 30)))

    @pytest.mark.unit
    def test_gap_spanning_segment_diverges(self, exon_chain):
        """The envelope covers 16-18 but no block does"""
        assert exon_chain.overlap(Segment(16, 18))
        assert not exon_chain.strict_overlap(Segment(16, 18))

    @pytest.mark.unit
    def test_empty_chain_never_overlaps(self, exon_chain):
        assert not Chain().overlap(Segment(1, 5))
        assert not Chain().strict_overlap(Segment(1, 5))
        assert not Chain().overlap(exon_chain)
        assert not exon_chain.overlap(Chain())
        assert not exon_chain.strict_overlap(Chain())
