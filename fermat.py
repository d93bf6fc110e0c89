import random

from math_funcs import mod_pow, random_bits

# typical confidence level, see false_positive_bound()
DEFAULT_ITERATIONS = 20
# rounds used when hunting for a random probable prime
RAND_PRIME_ITERATIONS = 10
# ranges up to this size are scanned in full by rand_prime()
RAND_PRIME_SCAN_LIMIT = 4096
# draws per bit of _max before rand_prime() gives up on a large range
RAND_PRIME_DRAWS_PER_BIT = 100

class PrimalityTestException(Exception):
    pass

class InvalidModulusException(PrimalityTestException):
    pass

class InvalidIterationCountException(PrimalityTestException):
    pass

class NoPrimeInRangeException(PrimalityTestException):
    pass


class RandomCoprimeGenerator:
    """
    Produces Fermat bases for a modulus n.

    rng - source of randomness, anything with getrandbits()
          (random.Random, random.SystemRandom).
          The caller owns it, pass a seeded one for reproducible runs.
    """
    def __init__(self, rng=None):
        if rng is None:
            rng = random.Random()
        self.rng = rng

    def next(self, n: int) -> int:
        """
        Rejection method: draw a random integer with the bit length of n
        and reject it unless 1 <= a < n.
        Draws fall into [0, 2n), so at least half of them are accepted.
        """
        if n <= 1:
            raise InvalidModulusException(
                    f"No Fermat base exists for n={n}, n must be > 1")

        bitlen = n.bit_length()
        while True:
            a = random_bits(bitlen, self.rng)
            if 1 <= a < n:
                return a


class FermatTester:
    def __init__(self, generator=None, iterations=DEFAULT_ITERATIONS):
        if generator is None:
            generator = RandomCoprimeGenerator()
        self.generator = generator
        self.iterations = iterations

    @staticmethod
    def is_witness(a: int, n: int) -> bool:
        # Fermat: n prime => a^(n-1) = 1 (mod n)
        return mod_pow(a, n - 1, n) != 1

    def bases(self, n: int, number_of_iterations: int):
        for _ in range(number_of_iterations):
            yield self.generator.next(n)

    def find_witness(self, n: int, number_of_iterations: int):
        """
        Returns the first Fermat witness among number_of_iterations random
        bases, or None if every base satisfied the congruence.
        """
        return next(
                (a for a in self.bases(n, number_of_iterations)
                    if self.is_witness(a, n)),
                None)

    def test(self, n: int, number_of_iterations: int = None) -> bool:
        """
        False - n is composite (a witness was found)
        True  - n is probably prime

        Carmichael numbers pass for every base coprime to them,
        so True is never a certificate.
        """
        if number_of_iterations is None:
            number_of_iterations = self.iterations
        if number_of_iterations < 1:
            raise InvalidIterationCountException(
                    f"Number of iterations must be >= 1, got {number_of_iterations}")

        # 1 is not prime, and has no base to draw
        if n == 1:
            return False

        return self.find_witness(n, number_of_iterations) is None

"""
Chance that a composite which is not a Carmichael number survives
number_of_iterations rounds. At least half of the bases are witnesses
for such numbers.
"""
def false_positive_bound(number_of_iterations: int) -> float:
    return 2.0 ** -number_of_iterations

def fermat_test(n: int, number_of_iterations: int = DEFAULT_ITERATIONS, rng=None) -> bool:
    tester = FermatTester(RandomCoprimeGenerator(rng))
    return tester.test(n, number_of_iterations)

"""
Picks a random probable prime from [_min, _max).

Small ranges are scanned in full, so a range without primes is reported
instead of searched forever. Large ranges are sampled, giving up after
RAND_PRIME_DRAWS_PER_BIT draws per bit of _max.
"""
def rand_prime(_min=2, _max=0, rng=None, k=RAND_PRIME_ITERATIONS):
    if rng is None:
        rng = random.Random()
    if _max <= 2 or _max <= _min:
        raise NoPrimeInRangeException(f"Range [{_min}, {_max}) holds no primes")

    tester = FermatTester(RandomCoprimeGenerator(rng), iterations=k)
    lo = max(_min, 2)

    if _max - lo <= RAND_PRIME_SCAN_LIMIT:
        primes = [p for p in range(lo, _max) if tester.test(p)]
        if not primes:
            raise NoPrimeInRangeException(f"Range [{_min}, {_max}) holds no primes")
        return rng.choice(primes)

    draws = RAND_PRIME_DRAWS_PER_BIT * _max.bit_length()
    for _ in range(draws):
        p = rng.randrange(lo, _max)
        if tester.test(p):
            return p

    raise NoPrimeInRangeException(
            f"No prime found in [{_min}, {_max}) after {draws} draws")


if __name__ == "__main__":
    rng = random.Random(2024)
    tester = FermatTester(RandomCoprimeGenerator(rng))

    for n in [2, 97, 7919, 2**127 - 1]:
        assert tester.test(n), n
    for n in [4, 100, (2**61 - 1) * (2**89 - 1)]:
        assert not tester.test(n), n

    # 561 = 3 * 11 * 17 fools the test for coprime bases
    print(f"Fermat witness for 561: {tester.find_witness(561, DEFAULT_ITERATIONS)}")
    print(f"False positive bound for {DEFAULT_ITERATIONS} iterations: "
          f"{false_positive_bound(DEFAULT_ITERATIONS)}")
