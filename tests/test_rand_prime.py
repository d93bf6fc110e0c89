import random
import threading

import pytest

from fermat import fermat_test, rand_prime, NoPrimeInRangeException, PrimalityTestException

MAX = 100000


def slow_is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def test_fermat_test_agrees_with_trial_division() -> None:
    rng = random.Random(12)
    carmichael = {561, 1105, 1729}
    for n in range(1, 2000):
        if n in carmichael:
            continue
        assert fermat_test(n, 40, rng=rng) == slow_is_prime(n), n


def test_rand_prime() -> None:
    rng = random.Random(14)
    for _ in range(50):
        p = rand_prime(_min=0, _max=MAX, rng=rng, k=30)
        assert 2 <= p < MAX
        assert slow_is_prime(p)


def test_rand_prime_large_range() -> None:
    rng = random.Random(16)
    p = rand_prime(_min=2**64, _max=2**65, rng=rng, k=30)
    assert 2**64 <= p < 2**65
    assert fermat_test(p, 40, rng=rng)


def test_rand_prime_small_range() -> None:
    rng = random.Random(15)
    assert rand_prime(_min=2, _max=3, rng=rng) == 2
    assert rand_prime(_min=24, _max=30, rng=rng) == 29


def test_rand_prime_range_without_primes() -> None:
    result = {}

    def draw():
        try:
            rand_prime(_min=24, _max=29, rng=random.Random(1))
        except NoPrimeInRangeException as e:
            result["error"] = e

    t = threading.Thread(target=draw, daemon=True)
    t.start()
    t.join(3)
    assert not t.is_alive()
    assert "holds no primes" in str(result["error"])

    with pytest.raises(NoPrimeInRangeException):
        rand_prime(_min=8, _max=11, rng=random.Random(2))


def test_rand_prime_empty_range() -> None:
    with pytest.raises(NoPrimeInRangeException):
        rand_prime(_min=0, _max=2)
    with pytest.raises(NoPrimeInRangeException):
        rand_prime(_min=50, _max=10)
    assert issubclass(NoPrimeInRangeException, PrimalityTestException)
