import random
import sys

from fermat import FermatTester, RandomCoprimeGenerator, PrimalityTestException, DEFAULT_ITERATIONS
from utils import parse_number, verdict_text, runtime_text, Stopwatch

PROMPT = "Please enter number to be tested for primality: "

"""
Asks for a number, tests it and reports the verdict and run time.
    stdin, stdout - streams to talk to the user through
    iterations    - number of Fermat rounds
    rng           - random source for the bases

Returns the exit status.
"""
def run(stdin=None, stdout=None, iterations=DEFAULT_ITERATIONS, rng=None) -> int:
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    print("\n" + PROMPT, file=stdout)

    line = stdin.readline()
    try:
        n = parse_number(line)
    except ValueError:
        print(f"err: '{line.strip()}' is not an integer", file=stdout)
        return 1

    tester = FermatTester(RandomCoprimeGenerator(rng), iterations=iterations)

    try:
        with Stopwatch() as sw:
            isprime = tester.test(n)
    except PrimalityTestException as e:
        print(f"err: {e}", file=stdout)
        return 1
    print("\n" + verdict_text(n, isprime) + "\n", file=stdout)
    print("\n" + runtime_text(n, sw.millis()) + "\n", file=stdout)

    return 0

"""
usage: cli.py [iterations [seed]]
"""
def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    iterations = DEFAULT_ITERATIONS
    rng = None
    try:
        if len(argv) > 0:
            iterations = int(argv[0])
        if len(argv) > 1:
            rng = random.Random(int(argv[1]))
    except ValueError:
        print("usage: cli.py [iterations [seed]]", file=sys.stderr)
        return 2

    if iterations < 1:
        print(f"err: number of iterations must be >= 1, got {iterations}", file=sys.stderr)
        return 2

    return run(iterations=iterations, rng=rng)


if __name__ == "__main__":
    sys.exit(main())
