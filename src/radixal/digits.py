# -----------------------------------------------------------------------------
#  digits.py
#  Lazy, double-ended digit decomposition of unsigned integers
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterator

from radixal.errors import NumberRangeError, OneRadixError, ZeroRadixError
from radixal.width import U64, UIntWidth


class DigitSequence:
    """
    The digits of `number` in base `radix`, most significant first.

    Digits are produced lazily from either end: iteration (or `next_front()`)
    walks from the most significant digit, `next_back()` from the least
    significant one. Both ends share one state and may be interleaved; every
    step consumes exactly one digit, so the two ends meet in the middle.

        >>> seq = DigitSequence(123, 10)
        >>> len(seq), next(seq), seq.next_back(), list(seq)
        (3, 1, 3, [2])

    Raises ZeroRadixError / OneRadixError for radix 0 / 1 and NumberRangeError
    when `number` or `radix` does not fit in `width`.
    """

    __slots__ = ("_len", "current", "radix", "splitter", "width")

    def __init__(self, number: int, radix: int = 10, width: UIntWidth = U64) -> None:
        if radix == 0:
            raise ZeroRadixError()
        if radix == 1:
            raise OneRadixError()
        if not width.contains(radix):
            raise NumberRangeError(f"radix {radix!r} does not fit in {width} (0..{width.max}).")
        if not width.contains(number):
            raise NumberRangeError(f"number {number!r} does not fit in {width} (0..{width.max}).")

        length = 1
        splitter = 1
        n = number
        while n >= radix:
            length += 1
            splitter *= radix
            n //= radix

        self.current = number
        self.radix = radix
        self.splitter = splitter
        self.width = width
        self._len = length

    # --- extraction ---

    def next_front(self) -> int | None:
        """Consume and return the most significant remaining digit (None when exhausted)."""
        if self._len == 0:
            return None
        digit = self.current // self.splitter
        self.current %= self.splitter
        self.splitter //= self.radix
        self._len -= 1
        return digit

    def next_back(self) -> int | None:
        """Consume and return the least significant remaining digit (None when exhausted)."""
        if self._len == 0:
            return None
        digit = self.current % self.radix
        self.current //= self.radix
        # unused on this path, but next_front() relies on it after interleaving
        self.splitter //= self.radix
        self._len -= 1
        return digit

    def __iter__(self) -> DigitSequence:
        return self

    def __next__(self) -> int:
        digit = self.next_front()
        if digit is None:
            raise StopIteration
        return digit

    def __reversed__(self) -> Iterator[int]:
        return _BackwardDigits(self)

    # --- size ---

    def remaining_len(self) -> int:
        return self._len

    def __len__(self) -> int:
        return self._len

    def size_hint(self) -> tuple[int, int]:
        return self._len, self._len

    def is_exhausted(self) -> bool:
        return self._len == 0

    # --- consuming operations ---

    def count(self) -> int:
        """Consume the sequence and return how many digits it still had."""
        n = self._len
        self._exhaust()
        return n

    def last(self) -> int | None:
        """Consume the sequence and return its least significant remaining digit."""
        digit = self.next_back()
        self._exhaust()
        return digit

    def into_number(self) -> int:
        """Fold the remaining digits, most significant first, back into a number."""
        acc = 0
        for digit in self:
            acc = acc * self.radix + digit
        return acc

    def into_reversed_number(self) -> int | None:
        """
        Fold the remaining digits least significant first, i.e. build the
        mirror-image number. Every step is checked against the width; returns
        None when the mirrored value does not fit (e.g. 129 -> 921 in u8).
        """
        width = self.width
        acc: int | None = 0
        while (digit := self.next_back()) is not None:
            if acc is None:
                continue
            acc = width.checked_mul(acc, self.radix)
            if acc is not None:
                acc = width.checked_add(acc, digit)
        return acc

    def _exhaust(self) -> None:
        self.current = 0
        self.splitter = 0
        self._len = 0

    # --- value semantics ---

    def copy(self) -> DigitSequence:
        dup = DigitSequence.__new__(DigitSequence)
        dup.current = self.current
        dup.radix = self.radix
        dup.splitter = self.splitter
        dup.width = self.width
        dup._len = self._len
        return dup

    __copy__ = copy

    def _state(self) -> tuple[int, int, int, int, UIntWidth]:
        return self.current, self.radix, self.splitter, self._len, self.width

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSequence):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return (f"DigitSequence(current={self.current}, radix={self.radix}, "
                f"splitter={self.splitter}, len={self._len}, width={self.width})")


class _BackwardDigits:
    """Iterates a DigitSequence from its least significant end, sharing its state."""

    __slots__ = ("_seq",)

    def __init__(self, seq: DigitSequence) -> None:
        self._seq = seq

    def __iter__(self) -> _BackwardDigits:
        return self

    def __next__(self) -> int:
        digit = self._seq.next_back()
        if digit is None:
            raise StopIteration
        return digit

    def __len__(self) -> int:
        return len(self._seq)

    def __reversed__(self) -> DigitSequence:
        return self._seq


def create(number: int, radix: int = 10, width: UIntWidth = U64) -> DigitSequence:
    """Validated construction; same as DigitSequence(number, radix, width)."""
    return DigitSequence(number, radix, width)
