import pytest

from algokit.digitdp import (
    MOD,
    count_investigation,
    count_magic_numbers,
    count_prime_digit_sum_multiples,
)


def test_investigation_with_k_one_counts_whole_range():
    low, high = 1, 20
    assert count_investigation(low, high, 1) == high - low + 1


def test_investigation_worked_example():
    assert count_investigation(1, 1000, 4) == 64


@pytest.mark.parametrize("k", [2, 3, 7, 11])
def test_investigation_is_additive(k):
    assert count_investigation(1, 3000, k) == (
        count_investigation(1, 1234, k) + count_investigation(1235, 3000, k)
    )


@pytest.mark.parametrize("k", [3, 5])
def test_investigation_single_numbers_sum_to_range(k):
    singles = sum(count_investigation(x, x, k) for x in range(1, 150))
    assert singles == count_investigation(1, 149, k)


def test_investigation_large_k_is_zero():
    assert count_investigation(1, 10**6, 101) == 0


def test_investigation_rejects_bad_arguments():
    with pytest.raises(ValueError):
        count_investigation(1, 10, 0)
    with pytest.raises(ValueError):
        count_investigation(10, 1, 3)


def test_magic_numbers_worked_example():
    assert count_magic_numbers(19, 7, "1000", "9999") == 6


@pytest.mark.parametrize(("m", "d"), [(2, 6), (3, 4), (7, 0)])
def test_magic_numbers_single_values_sum_to_range(m, d):
    singles = sum(count_magic_numbers(m, d, str(x), str(x)) for x in range(10, 100))
    assert singles == count_magic_numbers(m, d, "10", "99")


@pytest.mark.parametrize(("m", "d"), [(2, 6), (13, 5), (1, 1)])
def test_magic_numbers_are_additive(m, d):
    whole = count_magic_numbers(m, d, "1000", "9999")
    parts = count_magic_numbers(m, d, "1000", "4567") + count_magic_numbers(m, d, "4568", "9999")
    assert whole == parts % MOD


def test_magic_numbers_stay_below_modulus():
    result = count_magic_numbers(3, 5, "1" + "0" * 40, "9" * 41)
    assert 0 <= result < MOD


def test_magic_numbers_reject_mismatched_lengths():
    with pytest.raises(ValueError):
        count_magic_numbers(2, 6, "5", "99")


def test_prime_digit_sum_accepts_swapped_bounds():
    assert count_prime_digit_sum_multiples(500, 20, 7) == count_prime_digit_sum_multiples(20, 500, 7)


@pytest.mark.parametrize("k", [1, 3, 999])
def test_prime_digit_sum_is_additive_small_k(k):
    assert count_prime_digit_sum_multiples(1, 20000, k) == (
        count_prime_digit_sum_multiples(1, 8765, k)
        + count_prime_digit_sum_multiples(8766, 20000, k)
    )


def test_prime_digit_sum_single_numbers_sum_to_range():
    singles = sum(count_prime_digit_sum_multiples(x, x, 3) for x in range(1, 200))
    assert singles == count_prime_digit_sum_multiples(1, 199, 3)


def test_prime_digit_sum_large_k_matches_single_values():
    singles = sum(count_prime_digit_sum_multiples(x, x, 1000) for x in range(1, 5001))
    assert singles == count_prime_digit_sum_multiples(1, 5000, 1000)
    assert count_prime_digit_sum_multiples(1, 10**6, 1000) == (
        count_prime_digit_sum_multiples(1, 5 * 10**5, 1000)
        + count_prime_digit_sum_multiples(5 * 10**5 + 1, 10**6, 1000)
    )


def test_prime_digit_sum_rejects_zero_k():
    with pytest.raises(ValueError):
        count_prime_digit_sum_multiples(1, 10, 0)