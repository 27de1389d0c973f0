# src/radixal/errors.py
from __future__ import annotations


class UserInputError(Exception):
    pass


class RadixError(ValueError):
    """Base class for radixes that cannot decompose a number."""


class ZeroRadixError(RadixError):
    def __init__(self, msg: str = "radix 0: digit decomposition is undefined") -> None:
        super().__init__(msg)


class OneRadixError(RadixError):
    def __init__(self, msg: str = "radix 1: digit decomposition needs unbounded digits") -> None:
        super().__init__(msg)


class NumberRangeError(ValueError):
    pass
