# src/radixal/fmt.py
from __future__ import annotations

import re
from collections.abc import Iterable

from colorama import Fore, Style

from radixal.utility import dec_digits

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def abbr_int_fast(n: int, head: int = 10, tail: int = 10, threshold: int = 35, ellipsis: str = "…") -> str:
    """Abbreviate very large ints as first<head>…last<tail> without str(n)."""
    # Keep non-ints and small ints simple
    if not isinstance(n, int):
        return str(n)
    if n == 0:
        return "0"

    sign = "-" if n < 0 else ""
    a = -n if n < 0 else n

    # If not long enough, fall back to normal str()
    d = dec_digits(a)
    if d <= threshold or head + tail >= d:
        return sign + str(a)

    # compute first/last blocks exactly
    first = a // 10 ** (d - head)
    last = a % 10 ** tail
    # zero-pad last block to width 'tail'
    return f"{sign}{first}{ellipsis}{last:0{tail}d}"


def format_digits(digits: Iterable[int], radix: int, *, limit: int = 64, color: bool = True) -> str:
    """
    Render digits as '[1, 2, 3]₁₀'-style text: a decimal list with the radix
    as subscript. Lists longer than `limit` keep their head and tail.
    """
    toks = [str(d) for d in digits]
    if len(toks) > limit:
        half = max(1, limit // 2)
        hidden = len(toks) - 2 * half
        toks = [*toks[:half], f"…{hidden} more…", *toks[-half:]]
    body = ", ".join(toks)
    sub = str(radix).translate(_SUBSCRIPTS)
    if color:
        return f"[{Fore.CYAN}{body}{Style.RESET_ALL}]{Style.DIM}{sub}{Style.RESET_ALL}"
    return f"[{body}]{sub}"


_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)
