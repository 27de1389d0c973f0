# src/radixal/cli.py

"""
Radixal - digits of unsigned integers in any radix

Description:
    Decomposes an unsigned integer into its digits in a given radix and
    reconstructs numbers from them: digits from both ends, digit count,
    the rebuilt value and the digit-reversed value (checked against the
    chosen integer width).

usage: see radixal -h
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import textwrap
import traceback
from importlib.resources import files as pkg_files

from colorama import Fore, Style
from colorama import init as colorama_init

from radixal import config as CONFIG
from radixal.digits import DigitSequence
from radixal.errors import NumberRangeError, RadixError, UserInputError
from radixal.fmt import abbr_int_fast, format_digits
from radixal.runtime import APPLY, CFG
from radixal.runtime import current as _rt_current
from radixal.width import UIntWidth, width_from_name
from radixal.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir

_COMMANDS = {"init", "where", "profiles"}
_TWO_ARGS = 2


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    # Always show full Python tracebacks
    faulthandler.enable(file=sys.__stderr__)

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _debug(msg: str) -> None:
    if _rt_current().debug:
        print(f"{Style.DIM}[debug]{Style.RESET_ALL} {msg}", file=sys.stderr)


def _parse_int(text: str) -> int:
    """Python integer literal: 123, 1_000, 0xff, 0o17, 0b101 (leading zeros allowed)."""
    s = text.strip()
    for base in (0, 10):
        try:
            return int(s, base)
        except ValueError:
            continue
    raise UserInputError(f"Invalid input: '{text}' is not an integer.")


def _resolve_inputs(items: list[str]) -> tuple[str | None, str | None]:
    """Return (profile, number_text) from the positionals: [profile] NUMBER."""
    if not items:
        return None, None
    if len(items) == 1:
        return None, items[0]
    if len(items) == _TWO_ARGS:
        return items[0], items[1]
    raise UserInputError(f"Invalid input: expected [profile] NUMBER, got {len(items)} arguments.")


def _select_profile_name(explicit: str | None) -> str:
    """
    Precedence:
      1) explicit profile argument
      2) last used (from workspace)
      3) 'default'
    """
    if explicit:
        return explicit
    last = CONFIG.read_current_profile()
    if last and CONFIG.has_profile(last):
        return last
    return "default"


def _load_profile(explicit: str | None, *, force_debug: bool = False) -> str:
    name = _select_profile_name(explicit)
    if explicit and not CONFIG.has_profile(explicit):
        available = ", ".join(CONFIG.list_all_profiles())
        raise UserInputError(f"Unknown profile: '{explicit}'. Available profiles: {available}")
    if not CONFIG.has_profile(name):
        name = "default"
    selected = CONFIG.load_settings(name)
    APPLY(selected)
    if force_debug:
        _rt_current().debug = True
    if explicit:
        CONFIG.write_current_profile(explicit)

    _debug(f"active profile: {selected.name}")
    if selected._source:
        _debug(f"profile file: {selected._source}")
    return selected.name


def _trace_forward(seq: DigitSequence) -> None:
    """Print the state after every forward step (on a copy)."""
    walk = seq.copy()
    _debug(f"start: {walk!r}")
    while (digit := walk.next_front()) is not None:
        print(f"{Style.DIM}[trace]{Style.RESET_ALL} digit={digit} current={walk.current} "
              f"splitter={walk.splitter} len={len(walk)}", file=sys.stderr)


def print_report(seq: DigitSequence, number: int) -> None:
    radix = seq.radix
    forward = list(seq.copy())
    backward = list(reversed(seq.copy()))
    rebuilt = seq.copy().into_number()
    mirrored = seq.copy().into_reversed_number()

    def row(label: str, value: str) -> None:
        print(f"{Fore.GREEN}{label:<13}{Style.RESET_ALL}{value}")

    print(f"{Fore.YELLOW}{Style.BRIGHT}{abbr_int_fast(number)} in base {radix}{Style.RESET_ALL}")
    row("Width:", f"{seq.width} (max {abbr_int_fast(seq.width.max)})")
    row("Digits:", str(len(seq)))
    row("Forward:", format_digits(forward, radix))
    row("Backward:", format_digits(backward, radix))
    row("Digit sum:", str(sum(forward)))
    row("Palindrome:", "yes" if forward == backward else "no")
    row("Rebuilt:", abbr_int_fast(rebuilt))
    if mirrored is None:
        row("Reversed:", f"{Fore.RED}overflow{Style.RESET_ALL} (does not fit in {seq.width})")
    else:
        row("Reversed:", abbr_int_fast(mirrored))


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      init
          Create the workspace and copy packaged profiles if missing.

      where
          Show the workspace and package paths.

      profiles
          List available profiles with their descriptions.
    """)

    p = argparse.ArgumentParser(
        prog="radixal",
        description="Radixal — digits of unsigned integers in any radix",
        usage=(
            "radixal [profile] NUMBER [--radix R] [--width W] [--debug]\n"
            "       radixal init | where | profiles\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("items", nargs="*", metavar="[profile] NUMBER",
                   help="optional profile name followed by an unsigned integer")
    p.add_argument("-r", "--radix", default=None, help="Radix (default: profile DIGITS.RADIX)")
    p.add_argument("-w", "--width", default=None,
                   help="Integer width: u8, u16, u32, u64, u128, usize (default: profile DIGITS.WIDTH)")
    p.add_argument("--debug", action="store_true", help="Show profile info and a per-step digit trace")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        # Only show traceback in debug mode
        debug = "--debug" in (argv if argv is not None else sys.argv)
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init()

    parser = _build_parser()
    args = parser.parse_args(argv)
    rt = _rt_current()
    rt.debug = bool(args.debug)

    _install_loud_error_handlers(args.debug)

    # Ensure a first-run workspace seed silently
    ensure_workspace_seeded()

    items = list(args.items)
    if items and items[0] in _COMMANDS:
        return _run_command(items)

    profile, number_text = _resolve_inputs(items)
    if number_text is None:
        parser.print_help()
        return 0

    _load_profile(profile, force_debug=args.debug)

    number = _parse_int(number_text)
    radix = _parse_int(args.radix) if args.radix is not None else CFG("DIGITS.RADIX", 10)
    width: UIntWidth = width_from_name(args.width or CFG("DIGITS.WIDTH", "u64"))
    _debug(f"number={number} radix={radix} width={width}")

    try:
        seq = DigitSequence(number, radix, width)
    except (RadixError, NumberRangeError) as e:
        raise UserInputError(f"Invalid input: {e}") from None

    if rt.debug:
        _trace_forward(seq)
    print_report(seq, number)
    return 0


def _run_command(items: list[str]) -> int:
    cmd = items[0]
    if cmd == "init":
        overwrite = len(items) == _TWO_ARGS and items[1] == "overwrite"
        ws, copied = seed_workspace(overwrite=overwrite)
        note = " (overwrote existing files)" if overwrite else ""
        print(f"Workspace ready at: {ws}{note}")
        print(f"Copied -> profiles: {copied.get('profiles', 0)}")
        return 0
    if cmd == "where":
        print(f"Workspace: {workspace_dir()}")
        print(f"Package:   {pkg_files('radixal')}")
        return 0
    # profiles
    active = CONFIG.read_current_profile() or "default"
    for name, desc in CONFIG.list_profiles_with_descriptions():
        mark = f"{Fore.YELLOW}*{Style.RESET_ALL}" if name == active else " "
        print(f"{mark} {Fore.GREEN}{name:<12}{Style.RESET_ALL} {desc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
