"""Tests for index <-> fraction mapping."""

import math

import pytest

from speedreader.services.playback.progress import fraction_to_index, index_to_fraction


class TestFractionToIndex:
    @pytest.mark.parametrize(
        "fraction,count,expected",
        [
            (0.0, 11, 0),
            (1.0, 11, 10),
            (0.5, 11, 5),
            (0.25, 3, 1),  # 0.5 rounds half-up
            (0.24, 3, 0),
            (-0.3, 11, 0),
            (1.3, 11, 10),
            (math.nan, 11, 0),
            (0.7, 1, 0),
            (0.7, 0, 0),
        ],
    )
    def test_mapping(self, fraction, count, expected):
        assert fraction_to_index(fraction, count) == expected


class TestIndexToFraction:
    @pytest.mark.parametrize(
        "index,count,expected",
        [
            (0, 11, 0.0),
            (10, 11, 1.0),
            (5, 11, 0.5),
            (0, 1, 0.0),
            (0, 0, 0.0),
            (20, 11, 1.0),
        ],
    )
    def test_mapping(self, index, count, expected):
        assert index_to_fraction(index, count) == expected

    @pytest.mark.parametrize("count", [1, 2, 3, 7, 100, 1001])
    def test_round_trip(self, count):
        for index in range(count):
            assert fraction_to_index(index_to_fraction(index, count), count) == index
