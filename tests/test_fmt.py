# tests/test_fmt.py
from __future__ import annotations

from colorama import Fore, Style

from radixal.fmt import abbr_int_fast, format_digits, strip_ansi


def test_abbr_int_fast():
    assert abbr_int_fast(0) == "0"
    assert abbr_int_fast(123) == "123"
    assert abbr_int_fast(-42) == "-42"
    assert abbr_int_fast(10**40 + 7) == "1000000000…0000000007"
    assert abbr_int_fast("x") == "x"


def test_abbr_int_fast_huge():
    n = 10**20000 + 7
    assert abbr_int_fast(n) == "1000000000…0000000007"
    assert abbr_int_fast(-(10**20000 - 1)) == "-9999999999…9999999999"


def test_format_digits_plain():
    assert format_digits([1, 2, 3], 10, color=False) == "[1, 2, 3]₁₀"
    assert format_digits([], 2, color=False) == "[]₂"


def test_format_digits_truncates_long_lists():
    assert format_digits(range(10), 2, limit=4, color=False) == "[0, 1, …6 more…, 8, 9]₂"


def test_format_digits_colored_strips_to_plain():
    colored = format_digits([15, 15], 16)
    assert colored != format_digits([15, 15], 16, color=False)
    assert strip_ansi(colored) == "[15, 15]₁₆"


def test_strip_ansi():
    s = f"{Fore.RED}abc{Style.RESET_ALL}"
    assert strip_ansi(s) == "abc"
    assert strip_ansi(None) == ""
