# tests/test_cli.py
"""
End-to-end CLI runs: `main(argv)` with captured output.
"""

from __future__ import annotations

import sys

import pytest

from radixal import config
from radixal.cli import main
from radixal.fmt import strip_ansi

# ---------- helpers -----------------------------------------------------------


def _run(capsys, *argv: str) -> tuple[int, str, str]:
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, strip_ansi(out), strip_ansi(err)


def _rows(out: str) -> dict[str, str]:
    rows = {}
    for line in out.splitlines():
        if ":" in line:
            key, value = line.split(":", 1)
            rows[key.strip()] = value.strip()
    return rows


@pytest.fixture()
def restore_excepthook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


# ---------- reports -----------------------------------------------------------


def test_report_decimal(workspace, capsys):
    code, out, _ = _run(capsys, "123")
    assert code == 0
    assert "123 in base 10" in out
    rows = _rows(out)
    assert rows["Width"].startswith("u64")
    assert rows["Digits"] == "3"
    assert rows["Forward"] == "[1, 2, 3]₁₀"
    assert rows["Backward"] == "[3, 2, 1]₁₀"
    assert rows["Digit sum"] == "6"
    assert rows["Palindrome"] == "no"
    assert rows["Rebuilt"] == "123"
    assert rows["Reversed"] == "321"


def test_report_reversed_overflow(workspace, capsys):
    code, out, _ = _run(capsys, "129", "--width", "u8")
    assert code == 0
    rows = _rows(out)
    assert rows["Rebuilt"] == "129"
    assert rows["Reversed"] == "overflow (does not fit in u8)"


def test_report_hex_literal(workspace, capsys):
    code, out, _ = _run(capsys, "0xff", "-r", "16")
    assert code == 0
    rows = _rows(out)
    assert rows["Forward"] == "[15, 15]₁₆"
    assert rows["Palindrome"] == "yes"
    assert rows["Digit sum"] == "30"


def test_report_zero(workspace, capsys):
    code, out, _ = _run(capsys, "0")
    assert code == 0
    rows = _rows(out)
    assert rows["Digits"] == "1"
    assert rows["Forward"] == "[0]₁₀"


def test_profile_sets_radix_and_width_and_is_remembered(workspace, capsys):
    code, out, _ = _run(capsys, "binary", "5")
    assert code == 0
    rows = _rows(out)
    assert rows["Width"].startswith("u8")
    assert rows["Forward"] == "[1, 0, 1]₂"
    assert config.read_current_profile() == "binary"

    # last used profile applies when none is given
    code, out, _ = _run(capsys, "6")
    assert _rows(out)["Forward"] == "[1, 1, 0]₂"


def test_flags_override_profile(workspace, capsys):
    code, out, _ = _run(capsys, "hex", "255", "--radix", "10", "--width", "u16")
    assert code == 0
    rows = _rows(out)
    assert rows["Width"].startswith("u16")
    assert rows["Forward"] == "[2, 5, 5]₁₀"


# ---------- errors ------------------------------------------------------------


@pytest.mark.parametrize("argv,needle", [
    (["123", "--radix", "0"], "radix 0"),
    (["123", "-r", "1"], "radix 1"),
    (["abc"], "not an integer"),
    (["-5"], "does not fit"),
    (["300", "-w", "u8"], "does not fit"),
    (["123", "-w", "i8"], "unknown integer width"),
    (["nope", "5"], "Unknown profile"),
    (["a", "b", "c"], "expected [profile] NUMBER"),
])
def test_user_errors_exit_2(workspace, capsys, argv, needle):
    code, _, err = _run(capsys, *argv)
    assert code == 2
    assert needle in err
    assert "Traceback" not in err


# ---------- commands ----------------------------------------------------------


def test_where(workspace, capsys):
    code, out, _ = _run(capsys, "where")
    assert code == 0
    assert f"Workspace: {workspace.resolve()}" in out


def test_profiles_lists_packaged_profiles(workspace, capsys):
    code, out, _ = _run(capsys, "profiles")
    assert code == 0
    assert "default" in out
    assert "Binary digits of 8-bit unsigned integers" in out


def test_init_reports_copies(workspace, capsys):
    code, out, _ = _run(capsys, "init", "overwrite")
    assert code == 0
    assert "overwrote existing files" in out
    assert "profiles: 3" in out


def test_no_number_prints_help(workspace, capsys):
    code, out, _ = _run(capsys)
    assert code == 0
    assert "usage:" in out


def test_debug_traces_each_step(workspace, capsys, restore_excepthook):
    code, _, err = _run(capsys, "123", "--debug")
    assert code == 0
    assert "[debug] active profile: default" in err
    assert "[trace] digit=1 current=23 splitter=10 len=2" in err
    assert "[trace] digit=3 current=0 splitter=0 len=0" in err
