"""
Fibonacci — staircase counting

In how many ways can you reach the top of a staircase taking one or two
steps at a time?

    1 step  → 1 way
    2 steps → 2 ways
    3 steps → 3 ways
    4 steps → 5 ways

ways(steps) = fibonacci(steps + 1).
"""

from functools import lru_cache

from src.core.math.numerical_safeguards import validate_non_negative_int


@lru_cache(maxsize=None)
def fibonacci(n: int) -> int:
    """
    n-th Fibonacci number, fibonacci(0) = 0, fibonacci(1) = 1.

    Raises:
        ValueError: If n is negative
    """
    validate_non_negative_int(n, "n")
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def staircase_ways(steps: int) -> int:
    """Ways to climb `steps` stairs with strides of one or two."""
    validate_non_negative_int(steps, "steps")
    return fibonacci(steps + 1)


def fibonacci_sequence(count: int) -> list[int]:
    """fibonacci(0) .. fibonacci(count - 1)."""
    validate_non_negative_int(count, "count")
    return [fibonacci(i) for i in range(count)]
