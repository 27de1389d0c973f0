from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("radixal")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .config import has_profile, load_settings, read_current_profile
from .digits import DigitSequence, create
from .errors import NumberRangeError, OneRadixError, RadixError, UserInputError, ZeroRadixError
from .runtime import APPLY, CFG
from .utility import (
    digit_count,
    digit_product,
    digit_sum,
    digital_root_sequence,
    from_digits,
    is_palindrome,
    reverse_number,
    to_digits,
)
from .width import U8, U16, U32, U64, U128, USIZE, WIDTHS, UIntWidth, width_from_name
from .workspace import workspace_dir

__all__ = [
    "APPLY",
    "CFG",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "WIDTHS",
    "DigitSequence",
    "NumberRangeError",
    "OneRadixError",
    "RadixError",
    "UIntWidth",
    "UserInputError",
    "ZeroRadixError",
    "__version__",
    "create",
    "digit_count",
    "digit_product",
    "digit_sum",
    "digital_root_sequence",
    "from_digits",
    "has_profile",
    "is_palindrome",
    "load_settings",
    "read_current_profile",
    "reverse_number",
    "to_digits",
    "width_from_name",
    "workspace_dir"
]
