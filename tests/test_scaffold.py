"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and routes correctly.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from fairdesk import __version__
from fairdesk.cli import exit_codes
from fairdesk.cli.app import cli, main
from fairdesk.exceptions import (
    EmptyListError,
    EnvironmentError,
    FairdeskError,
    InvalidIndexError,
    ParseFailure,
    ParseFailureReason,
    PersistenceError,
    SnapshotCorruptError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidIndexError,
            EmptyListError,
            PersistenceError,
            SnapshotCorruptError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[FairdeskError]
    ) -> None:
        assert issubclass(exc_class, FairdeskError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(FairdeskError, Exception)

    def test_hint_is_stored(self) -> None:
        err = FairdeskError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert FairdeskError("boom").hint is None

    def test_parse_failure_carries_reason(self) -> None:
        err = ParseFailure("bad", reason=ParseFailureReason.INVALID_EMAIL, hint="h")
        assert isinstance(err, FairdeskError)
        assert err.reason is ParseFailureReason.INVALID_EMAIL
        assert err.hint == "h"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("fairdesk.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, mock_doc: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_one_shot_command_persists(self, tmp_path: Path) -> None:
        data_file = tmp_path / "fair.json"
        code = main(["--data-file", str(data_file), "add", "n/Acme", "i/Tech", "c/91234567", "e/x@y.com"])
        assert code == exit_codes.SUCCESS
        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert document["companies"][0]["name"] == "Acme"

    def test_one_shot_error(self, tmp_path: Path) -> None:
        assert main(["--data-file", str(tmp_path / "f.json"), "confirm", "1"]) == exit_codes.GENERAL_ERROR

    def test_data_file_from_environment(self, tmp_path: Path) -> None:
        assert main(["load", "samples"]) == exit_codes.SUCCESS
        assert (tmp_path / "roster.json").exists()

    def test_no_args_starts_session(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from fairdesk.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module, "_handle_session", lambda data_file, words: seen.append(words) or exit_codes.SUCCESS,
        )
        assert main([]) == exit_codes.SUCCESS
        assert seen == [[]]


# ---------------------------------------------------------------------------
# Process-level error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_corrupt_snapshot_exits_with_general_error(self, tmp_path: Path) -> None:
        (tmp_path / "roster.json").write_text("{broken", encoding="utf-8")
        with patch("sys.argv", ["fairdesk", "list", "companies"]):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR

    def test_undecodable_snapshot_exits_with_general_error(self, tmp_path: Path) -> None:
        (tmp_path / "roster.json").write_bytes(b"\xff\xfe")
        with patch("sys.argv", ["fairdesk", "list", "companies"]):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR

    def test_keyboard_interrupt(self) -> None:
        with patch("fairdesk.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self) -> None:
        with patch("fairdesk.cli.app.main", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR

    def test_success_exit_code(self) -> None:
        with patch("fairdesk.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS
