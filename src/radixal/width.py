# src/radixal/width.py
"""
Fixed-width unsigned integer contract.

Python ints never overflow, so the width a number lives in is passed around
explicitly. A width supplies the capabilities digit decomposition relies on:
ordering and zero/one (plain ints), a maximum value, and checked add/multiply.
"""

from __future__ import annotations

from dataclasses import dataclass

from radixal.errors import UserInputError


@dataclass(frozen=True)
class UIntWidth:
    name: str
    bits: int

    @property
    def max(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: object) -> bool:
        # bool is an int subclass but never a digit or a radix
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return 0 <= value <= self.max

    def checked_add(self, a: int, b: int) -> int | None:
        s = a + b
        return s if s <= self.max else None

    def checked_mul(self, a: int, b: int) -> int | None:
        p = a * b
        return p if p <= self.max else None

    @classmethod
    def fitting(cls, *values: object) -> UIntWidth:
        """
        Narrowest predefined width (u8..u128) holding every int in values.

        Past u128 a byte-multiple width is synthesized (e.g. u136); the digit
        helpers use these to accept any non-negative int.
        """
        bits = max((v.bit_length() for v in values if isinstance(v, int) and not isinstance(v, bool)),
                   default=0)
        for w in (U8, U16, U32, U64, U128):
            if bits <= w.bits:
                return w
        bits = -(-bits // 8) * 8
        return cls(f"u{bits}", bits)

    def __str__(self) -> str:
        return self.name


U8 = UIntWidth("u8", 8)
U16 = UIntWidth("u16", 16)
U32 = UIntWidth("u32", 32)
U64 = UIntWidth("u64", 64)
U128 = UIntWidth("u128", 128)
USIZE = U64

WIDTHS: dict[str, UIntWidth] = {
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
    "u128": U128,
    "usize": USIZE,
}


def width_from_name(name: str) -> UIntWidth:
    """Resolve 'u8', 'U32', 'usize', ... to a width; unknown names are user errors."""
    key = str(name or "").strip().lower()
    try:
        return WIDTHS[key]
    except KeyError:
        known = ", ".join(WIDTHS)
        raise UserInputError(f"unknown integer width {name!r} (expected one of: {known}).") from None
