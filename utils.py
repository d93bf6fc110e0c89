import time

def parse_number(line: str) -> int:
    """
    Reads the first whitespace separated token of line as an integer.
    Raises ValueError if there is none or it is not an integer.
    """
    tokens = line.split()
    if not tokens:
        raise ValueError("No number was entered")
    return int(tokens[0])

def verdict_text(n: int, isprime: bool) -> str:
    return f"{n} is prime." if isprime else f"{n} is composite."

def runtime_text(n: int, millis: int) -> str:
    return f"Total run time for {n} was {millis} milliseconds."

class Stopwatch:
    def __init__(self):
        self.start = None
        self.end = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *exc):
        self.end = time.perf_counter()
        return False

    # elapsed wall clock time in whole milliseconds
    def millis(self) -> int:
        end = self.end if self.end is not None else time.perf_counter()
        return int((end - self.start) * 1000)
