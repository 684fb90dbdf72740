from __future__ import annotations

import pytest

from lib_log_prefix import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()

    assert summary.startswith("Info for lib_log_prefix:\n")
    assert f"    version       = {__init__conf__.version}\n" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    __init__conf__.print_info()

    assert capsys.readouterr().out == summary_info()
