"""Number theory and small geometry helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import accumulate

__all__ = [
    "MOD",
    "DEFAULT_PRIME_LIMIT",
    "Point",
    "BinomialTable",
    "sieve_primes",
    "prime_factor_count",
    "mod_pow",
    "extended_gcd",
    "mod_inverse",
    "polar_angle",
    "twice_triangle_area",
]

MOD = 1_000_000_007
DEFAULT_PRIME_LIMIT = 31621


def sieve_primes(limit: int = DEFAULT_PRIME_LIMIT) -> list[int]:
    """Return all primes strictly below ``limit``."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * limit
    is_prime[0] = is_prime[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return [number for number, flag in enumerate(is_prime) if flag]


def prime_factor_count(value: int, primes: Iterable[int]) -> int:
    """Count prime factors of ``value``, with multiplicity, among ``primes``.

    ``primes`` must be ascending; factors not in it are not counted.
    """
    count = 0
    for p in primes:
        if p > value:
            break
        while value % p == 0:
            value //= p
            count += 1
    return count


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int) -> int:
    """Multiplicative inverse of ``a`` modulo ``modulus``; they must be coprime."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a % modulus, modulus)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus}")
    return x % modulus


class BinomialTable:
    """Binomial coefficients modulo a prime from precomputed factorials."""

    def __init__(self, size: int, modulus: int = MOD) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.modulus = modulus
        self._factorials = list(
            accumulate(range(1, size), lambda acc, i: acc * i % modulus, initial=1)
        )

    def ncr(self, n: int, r: int) -> int:
        """Return ``C(n, r)`` modulo the table's modulus."""
        if n < 0 or r < 0:
            raise ValueError("n and r must be non-negative")
        if n >= len(self._factorials):
            raise ValueError(f"n must be below {len(self._factorials)}")
        if r > n:
            return 0
        fact = self._factorials
        denominator = fact[n - r] * fact[r] % self.modulus
        return fact[n] * mod_pow(denominator, self.modulus - 2, self.modulus) % self.modulus


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def polar_angle(point: Point) -> float:
    """Angle of ``point`` in radians within ``[0, 2*pi)``.

    Points on an axis map exactly onto a multiple of pi/2; elsewhere the
    quadrant is offset by ``atan(x / y)``. The origin maps to 3*pi/2.
    """
    x, y = float(point.x), float(point.y)
    if x == 0:
        return math.pi / 2 if y > 0 else 1.5 * math.pi
    if y == 0:
        return 0.0 if x > 0 else math.pi
    if x > 0 and y > 0:
        return math.atan(x / y)
    if x > 0:
        return 2 * math.pi + math.atan(x / y)
    return math.pi + math.atan(x / y)


def twice_triangle_area(a: Point, b: Point, c: Point) -> int:
    """Twice the area of triangle ``abc``, kept integral."""
    return abs(a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))