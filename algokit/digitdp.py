"""Digit dynamic programming counts over integer ranges."""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "MOD",
    "count_investigation",
    "count_magic_numbers",
    "count_prime_digit_sum_multiples",
]

MOD = 1_000_000_007

_SMALL_PRIMES = frozenset(
    p for p in range(2, 100) if all(p % divisor for divisor in range(2, p))
)


def _digits(number: int) -> list[int]:
    return [int(ch) for ch in str(number)]


def _count_investigation_upto(bound: int, k: int) -> int:
    if bound < 0:
        return 0
    digits = _digits(bound)

    @lru_cache(maxsize=None)
    def count(pos: int, remainder: int, digit_sum: int, tight: bool) -> int:
        if pos == len(digits):
            return int(remainder == 0 and digit_sum == 0)
        limit = digits[pos] if tight else 9
        return sum(
            count(pos + 1, (remainder * 10 + d) % k, (digit_sum + d) % k, tight and d == limit)
            for d in range(limit + 1)
        )

    return count(0, 0, 0, True)


def count_investigation(low: int, high: int, k: int) -> int:
    """Count numbers in ``[low, high]`` divisible by ``k`` whose digit sum is too.

    For ``k`` above 100 the count is taken to be zero.
    """
    if k < 1:
        raise ValueError("k must be positive")
    if low > high:
        raise ValueError("low must not exceed high")
    if k > 100:
        return 0
    return _count_investigation_upto(high, k) - _count_investigation_upto(low - 1, k)


def _allowed_digits(pos: int, d: int) -> tuple[int, ...]:
    if pos % 2:
        return (d,)
    return tuple(digit for digit in range(10) if digit != d)


def _is_magic_multiple(digits: list[int], m: int, d: int) -> bool:
    if any((digit == d) != (pos % 2 == 1) for pos, digit in enumerate(digits)):
        return False
    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + digit) % m
    return remainder == 0


def _count_magic_upto(digits: list[int], m: int, d: int) -> int:
    loose = [0] * m
    tight = True
    tight_remainder = 0
    for pos, limit in enumerate(digits):
        allowed = _allowed_digits(pos, d)
        following = [0] * m
        for remainder, ways in enumerate(loose):
            if not ways:
                continue
            for digit in allowed:
                slot = (remainder * 10 + digit) % m
                following[slot] = (following[slot] + ways) % MOD
        if tight:
            for digit in allowed:
                if digit < limit:
                    slot = (tight_remainder * 10 + digit) % m
                    following[slot] = (following[slot] + 1) % MOD
            tight = limit in allowed
            tight_remainder = (tight_remainder * 10 + limit) % m
        loose = following
    return (loose[0] + int(tight and tight_remainder == 0)) % MOD


def count_magic_numbers(m: int, d: int, low, high) -> int:
    """Count d-magic multiples of ``m`` in ``[low, high]``, modulo ``MOD``.

    A number is d-magic when the digit ``d`` fills every even position
    (counting from 1 on the left) and appears nowhere else. ``low`` and
    ``high`` are decimal strings (or integers) with the same number of digits.
    """
    low_text, high_text = str(low), str(high)
    if not (low_text.isdigit() and high_text.isdigit()):
        raise ValueError("bounds must be non-negative decimal numbers")
    if len(low_text) != len(high_text):
        raise ValueError("bounds must have the same number of digits")
    if m < 1:
        raise ValueError("m must be positive")
    if not 0 <= d <= 9:
        raise ValueError("d must be a decimal digit")
    low_digits = [int(ch) for ch in low_text]
    high_digits = [int(ch) for ch in high_text]
    total = (
        _count_magic_upto(high_digits, m, d)
        - _count_magic_upto(low_digits, m, d)
        + int(_is_magic_multiple(low_digits, m, d))
    )
    return total % MOD


def _count_prime_sum_upto(bound: int, k: int) -> int:
    if bound < 0:
        return 0
    digits = _digits(bound)

    @lru_cache(maxsize=None)
    def count(pos: int, remainder: int, digit_sum: int, tight: bool) -> int:
        if pos == len(digits):
            return int(remainder == 0 and digit_sum in _SMALL_PRIMES)
        limit = digits[pos] if tight else 9
        return sum(
            count(pos + 1, (remainder * 10 + d) % k, digit_sum + d, tight and d == limit)
            for d in range(limit + 1)
        )

    return count(0, 0, 0, True)


def _digit_sum(number: int) -> int:
    return sum(_digits(abs(number)))


def count_prime_digit_sum_multiples(low: int, high: int, k: int) -> int:
    """Count multiples of ``k`` between ``low`` and ``high`` with a prime digit sum.

    The bounds may be given in either order; only primes below 100 count.
    """
    if k < 1:
        raise ValueError("k must be positive")
    low, high = sorted((low, high))
    if k < 1000:
        return _count_prime_sum_upto(high, k) - _count_prime_sum_upto(low - 1, k)
    first = -(-low // k) * k
    return sum(1 for value in range(first, high + 1, k) if _digit_sum(value) in _SMALL_PRIMES)