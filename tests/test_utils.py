import time

import pytest

from utils import parse_number, verdict_text, runtime_text, Stopwatch


def test_parse_number() -> None:
    assert parse_number("97\n") == 97
    assert parse_number("  7919  extra") == 7919
    assert parse_number("-3") == -3
    assert parse_number(str(2**127 - 1)) == 2**127 - 1


def test_parse_number_rejects_garbage() -> None:
    for line in ["", "   \n", "abc", "1.5"]:
        with pytest.raises(ValueError):
            parse_number(line)


def test_texts() -> None:
    assert verdict_text(7, True) == "7 is prime."
    assert verdict_text(8, False) == "8 is composite."
    assert runtime_text(7, 12) == "Total run time for 7 was 12 milliseconds."


def test_stopwatch() -> None:
    with Stopwatch() as sw:
        time.sleep(0.03)
    elapsed = sw.millis()
    assert elapsed >= 20
    # frozen after the block
    time.sleep(0.03)
    assert sw.millis() == elapsed
