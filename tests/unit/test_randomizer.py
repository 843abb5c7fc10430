"""
Tests for the randomizer

Checks:
1. Samples stay within their bounds
2. Rejection of the biased fragment
3. Argument validation
"""

import logging

import pytest

from src.core.math import randomizer
from src.core.math.randomizer import random_below, random_between


class TestRandomBelow:
    """Tests for random_below"""

    @pytest.mark.parametrize("bound", [1, 2, 3, 255, 256, 257, 10**30, 2**127 - 1])
    def test_within_bound(self, bound: int) -> None:
        """0 <= r < bound"""
        for _ in range(200):
            assert 0 <= random_below(bound) < bound

    def test_bound_one(self) -> None:
        """Only zero fits below one"""
        assert random_below(1) == 0

    def test_covers_small_range(self) -> None:
        """Every residue of a small bound shows up"""
        seen = {random_below(6) for _ in range(2000)}
        assert seen == set(range(6))

    @pytest.mark.parametrize("bound", [0, -5])
    def test_non_positive_bound_rejected(self, bound: int) -> None:
        """bound must be positive"""
        with pytest.raises(ValueError, match="bound must be positive"):
            random_below(bound)

    def test_draw_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Buffer is two bytes wider than the bound"""
        widths: list[int] = []

        def fake_token_bytes(n: int) -> bytes:
            widths.append(n)
            return bytes(n)

        monkeypatch.setattr(randomizer.secrets, "token_bytes", fake_token_bytes)
        random_below(300)
        assert widths == [4]

    def test_biased_sample_redrawn(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Samples at or above the validity bound are rejected"""
        draws = iter([b"\xff\xff\xff", b"\x05\x00\x00"])
        monkeypatch.setattr(randomizer.secrets, "token_bytes", lambda n: next(draws))

        with caplog.at_level(logging.DEBUG, logger=randomizer.__name__):
            assert random_below(3) == 2
        assert "redrawing" in caplog.text


class TestRandomBetween:
    """Tests for random_between"""

    def test_half_open_interval(self) -> None:
        """low <= r < high"""
        for _ in range(200):
            assert 10 <= random_between(10, 20) < 20

    def test_negative_range(self) -> None:
        """Ranges below zero"""
        for _ in range(100):
            assert -5 <= random_between(-5, -2) < -2

    def test_single_value(self) -> None:
        """A width-one range has one outcome"""
        assert random_between(7, 8) == 7

    @pytest.mark.parametrize("low,high", [(5, 5), (5, 4)])
    def test_empty_range_rejected(self, low: int, high: int) -> None:
        """high must exceed low"""
        with pytest.raises(ValueError, match="high must be greater than low"):
            random_between(low, high)
