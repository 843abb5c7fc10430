"""
Tests for primality

Checks:
1. Small primes and composites (including Carmichael numbers)
2. Deterministic Miller-Rabin below 2^64
3. Probabilistic Miller-Rabin above 2^64
"""

import pytest

from src.core.math.primality import (
    DETERMINISTIC_LIMIT,
    deterministic_witnesses,
    is_prime,
    is_prime_trial_division,
    miller_rabin,
)

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 97]


class TestSmallNumbers:
    """Trial division range"""

    @pytest.mark.parametrize("n", SMALL_PRIMES)
    def test_primes(self, n: int) -> None:
        """Known small primes"""
        assert is_prime(n)
        assert is_prime_trial_division(n)

    @pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 21, 25, 49, 91, 561, 1105])
    def test_composites_and_non_positive(self, n: int) -> None:
        """Composites, Carmichael numbers and values below two"""
        assert not is_prime(n)
        assert not is_prime_trial_division(n)

    def test_agrees_with_sieve(self) -> None:
        """Matches a sieve of Eratosthenes below 2000"""
        limit = 2000
        sieve = [True] * limit
        sieve[0] = sieve[1] = False
        for i in range(2, limit):
            if sieve[i]:
                for j in range(i * i, limit, i):
                    sieve[j] = False
        assert [n for n in range(limit) if is_prime(n)] == [n for n in range(limit) if sieve[n]]

    def test_largest_31_bit_prime(self) -> None:
        """2^31 - 1 is prime"""
        assert is_prime(2**31 - 1)


class TestDeterministicRange:
    """Miller-Rabin with fixed witnesses below 2^64"""

    def test_billboard_prime(self) -> None:
        """7427466391 is prime"""
        assert is_prime(7427466391)

    def test_strong_pseudoprime_to_small_witnesses(self) -> None:
        """4759123141 fools {2, 7, 61} but is composite"""
        assert not is_prime(4759123141)
        assert 4759123141 == 48781 * 97561

    def test_mersenne_61(self) -> None:
        """2^61 - 1 is prime"""
        assert is_prime(2**61 - 1)

    def test_semiprime(self) -> None:
        """Product of two 31-bit primes"""
        assert not is_prime((2**31 - 1) * 2147483629)

    @pytest.mark.parametrize(
        "n,witnesses",
        [
            (1000, (2, 7, 61)),
            (4_759_123_140, (2, 7, 61)),
            (4_759_123_141, (2, 3, 5, 7, 11, 13, 17)),
            (2**63, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
        ],
    )
    def test_witness_selection(self, n: int, witnesses: tuple[int, ...]) -> None:
        """Witness set depends on the magnitude"""
        assert deterministic_witnesses(n) == witnesses

    def test_no_witnesses_above_limit(self) -> None:
        """No deterministic set at or above 2^64"""
        with pytest.raises(ValueError, match="No deterministic witness set"):
            deterministic_witnesses(DETERMINISTIC_LIMIT)

    def test_witness_clamped(self) -> None:
        """Witnesses larger than n - 2 are clamped"""
        assert miller_rabin(5, (61,))
        assert miller_rabin(7, (2, 7, 61))


class TestProbabilisticRange:
    """Random witnesses above 2^64"""

    def test_mersenne_89(self) -> None:
        """2^89 - 1 is prime"""
        assert is_prime(2**89 - 1)

    def test_mersenne_127(self) -> None:
        """2^127 - 1 is prime"""
        assert is_prime(2**127 - 1)

    def test_composites(self) -> None:
        """2^89 + 1 and 2^67 - 1 are composite"""
        assert not is_prime(2**89 + 1)
        assert not is_prime(2**67 - 1)

    def test_product_of_large_primes(self) -> None:
        """Product of two Mersenne primes"""
        assert not is_prime((2**61 - 1) * (2**89 - 1))
