# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable

from radixal.digits import DigitSequence
from radixal.errors import NumberRangeError, OneRadixError, ZeroRadixError
from radixal.width import U64, UIntWidth


def _digits(n: int, radix: int) -> DigitSequence:
    # helpers take any non-negative int; the width only matters for folds
    return DigitSequence(n, radix, UIntWidth.fitting(n, radix))


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str() or repeated division; handles n >= 0."""
    n = abs(n)
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2)); 0.30103 ~ log10(2)
    est = (n.bit_length() * 30103) // 100000
    # bring into correct decade with at most a couple of steps
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        p10 *= 10
        while n >= p10:
            est += 1
            p10 *= 10
    return est + 1


def digit_count(n: int, radix: int = 10) -> int:
    """Exact number of base-`radix` digits of n (zero has one digit)."""
    return len(_digits(n, radix))


def to_digits(n: int, radix: int = 10, *, reverse: bool = False) -> list[int]:
    """
    Digits of n, most significant first (least significant first if reverse).
    """
    seq = _digits(n, radix)
    return list(reversed(seq)) if reverse else list(seq)


def from_digits(digits: Iterable[int], radix: int = 10, width: UIntWidth = U64) -> int:
    """
    Rebuild a number from most-significant-first digits, checked against width.

    Raises RadixError for radix 0/1 and NumberRangeError for a digit outside
    0..radix-1 or a value that does not fit in width.
    """
    if radix == 0:
        raise ZeroRadixError()
    if radix == 1:
        raise OneRadixError()
    if not width.contains(radix):
        raise NumberRangeError(f"radix {radix!r} does not fit in {width} (0..{width.max}).")

    acc = 0
    for pos, d in enumerate(digits):
        if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d < radix:
            raise NumberRangeError(f"digit #{pos + 1} is {d!r}, expected 0..{radix - 1}.")
        nxt = width.checked_mul(acc, radix)
        nxt = None if nxt is None else width.checked_add(nxt, d)
        if nxt is None:
            raise NumberRangeError(f"digits do not fit in {width} (max {width.max}).")
        acc = nxt
    return acc


def digit_sum(n: int, radix: int = 10) -> int:
    """
    Calculate the sum of digits of n.
    Args: n (int): The number. radix (int): The base.

    Returns: int: The sum of the base-`radix` digits.
    """
    return sum(_digits(n, radix))


def digit_product(n: int, radix: int = 10) -> int:
    """
    Return the product of the base-`radix` digits of n.
    """
    prod = 1
    for d in _digits(n, radix):
        prod *= d
        if prod == 0:
            break
    return prod


def digital_root_sequence(n: int, radix: int = 10) -> list[int]:
    """
    Return the digital root sequence for n, repeatedly summing its digits
    until a single digit is reached, including the starting value.
    """
    _digits(n, radix)  # validates n and radix even when n is already one digit
    seq = [n]
    while seq[-1] >= radix:
        seq.append(digit_sum(seq[-1], radix))
    return seq


def reverse_number(n: int, radix: int = 10, width: UIntWidth = U64) -> int | None:
    """n with its digits mirrored, or None if the mirror overflows width."""
    return DigitSequence(n, radix, width).into_reversed_number()


def is_palindrome(n: int, radix: int = 10) -> bool:
    # walk inwards from both ends of one sequence
    seq = _digits(n, radix)
    while len(seq) > 1:
        if seq.next_front() != seq.next_back():
            return False
    return True
