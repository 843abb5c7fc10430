"""
Tests for the puzzle programs

Checks:
1. Digits of e from the BigDecimal series
2. Billboard riddles (first 10-digit prime, windows summing to 49)
3. Fibonacci staircase counts
4. Monty Hall win rates
5. Command line runner
"""

import random

import pytest

from src.core.math import BigDecimal
from src.puzzles import (
    MontyHallResult,
    e_digits,
    fibonacci,
    fibonacci_sequence,
    first_prime_window,
    nth_window_with_digit_sum,
    simulate,
    staircase_ways,
)
from src.puzzles.__main__ import main


@pytest.fixture(scope="module")
def digits_of_e() -> str:
    """First 200 digits of e."""
    return e_digits(200)


# =============================================================================
# BILLBOARD
# =============================================================================


class TestEDigits:
    """Tests for e_digits"""

    def test_known_prefix(self) -> None:
        """First 20 digits"""
        assert e_digits(20) == "27182818284590452353"

    def test_exact_length(self, digits_of_e: str) -> None:
        """Exactly the requested number of digits"""
        assert len(digits_of_e) == 200
        assert digits_of_e.startswith("2718281828459045235360287471352662497757")

    def test_prefix_stable(self, digits_of_e: str) -> None:
        """Shorter requests are prefixes of longer ones"""
        assert digits_of_e.startswith(e_digits(60))

    def test_count_must_be_positive(self) -> None:
        """Zero digits is rejected"""
        with pytest.raises(ValueError, match="count must be positive"):
            e_digits(0)


class TestBillboard:
    """Tests for the billboard riddles"""

    def test_first_prime_window(self, digits_of_e: str) -> None:
        """First 10-digit prime in e"""
        match = first_prime_window(digits_of_e)
        assert match is not None
        assert match.window == "7427466391"
        assert match.start == 99

    @pytest.mark.parametrize(
        "n,window,start",
        [
            (1, "7182818284", 1),
            (2, "8182845904", 5),
            (3, "8747135266", 23),
            (4, "7427466391", 99),
            (5, "5966290435", 127),
        ],
    )
    def test_windows_summing_to_49(self, digits_of_e: str, n: int, window: str, start: int) -> None:
        """f(1) .. f(5)"""
        match = nth_window_with_digit_sum(digits_of_e, n)
        assert match is not None
        assert (match.window, match.start) == (window, start)

    def test_exhausted_digits(self) -> None:
        """None when the digit string runs out"""
        assert first_prime_window("1111111111") is None
        assert nth_window_with_digit_sum("99999", 1) is None

    def test_leading_zero_window_skipped(self) -> None:
        """Windows starting with 0 are not 10-digit numbers"""
        assert first_prime_window("0000000002", width=10) is None
        assert first_prime_window("01", width=1) is None
        assert first_prime_window("07", width=1).window == "7"

    def test_non_digit_rejected(self) -> None:
        """Non-digit characters in a window"""
        with pytest.raises(ValueError, match="Non-digit"):
            first_prime_window("2.718281828459")


# =============================================================================
# FIBONACCI
# =============================================================================


class TestFibonacci:
    """Tests for the staircase counts"""

    def test_sequence(self) -> None:
        """First terms"""
        assert fibonacci_sequence(10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    @pytest.mark.parametrize("steps,ways", [(0, 1), (1, 1), (2, 2), (3, 3), (4, 5), (10, 89)])
    def test_staircase(self, steps: int, ways: int) -> None:
        """Ways to climb with strides of one or two"""
        assert staircase_ways(steps) == ways

    def test_large_index(self) -> None:
        """Memoized recursion reaches large indices"""
        assert fibonacci(100) == 354224848179261915075

    def test_negative_rejected(self) -> None:
        """Negative indices are rejected"""
        with pytest.raises(ValueError, match="n must be non-negative"):
            fibonacci(-1)


# =============================================================================
# MONTY HALL
# =============================================================================


class TestMontyHall:
    """Tests for the Monty Hall simulation"""

    def test_counts_add_up(self) -> None:
        """Every game is won by exactly one strategy"""
        result = simulate(1000, random.Random(42))
        assert result.stay_wins + result.switch_wins == 1000

    def test_reproducible_with_seed(self) -> None:
        """Same seed, same outcome"""
        assert simulate(500, random.Random(7)) == simulate(500, random.Random(7))

    def test_switching_wins_two_thirds(self) -> None:
        """Switch rate approaches 2/3"""
        result = simulate(10_000, random.Random(42))
        assert result.switch_percentage.to_float() == pytest.approx(200 / 3, abs=3)
        assert result.stay_percentage.to_float() == pytest.approx(100 / 3, abs=3)

    def test_percentages(self) -> None:
        """Percentages are BigDecimal quotients of the counts"""
        result = MontyHallResult(iterations=8, stay_wins=2, switch_wins=6)
        assert result.stay_percentage == BigDecimal(25)
        assert result.switch_percentage == BigDecimal(75)

    def test_iterations_must_be_positive(self) -> None:
        """Zero games is rejected"""
        with pytest.raises(ValueError, match="iterations must be positive"):
            simulate(0)


# =============================================================================
# COMMAND LINE
# =============================================================================


class TestCommandLine:
    """Tests for `python -m src.puzzles`"""

    def test_billboard(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints both billboard answers"""
        assert main(["billboard"]) == 0
        out = capsys.readouterr().out
        assert "Found: 7427466391.com (at 99)" in out
        assert "Found: f(5) = 5966290435" in out

    def test_billboard_too_few_digits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Non-zero exit when the digits run out"""
        assert main(["billboard", "--digits", "50"]) == 1
        assert "No 10-digit prime" in capsys.readouterr().out

    def test_fibonacci(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the sequence and the staircase counts"""
        assert main(["fibonacci", "--count", "5"]) == 0
        out = capsys.readouterr().out
        assert "fibonacci(4) = 3" in out
        assert "4 steps: 5 ways" in out

    def test_monty_hall(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints both win rates"""
        assert main(["monty-hall", "--iterations", "100", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("stay: ")
        assert "switch: " in out

    def test_unknown_command(self) -> None:
        """argparse exits on unknown commands"""
        with pytest.raises(SystemExit):
            main(["unknown"])
