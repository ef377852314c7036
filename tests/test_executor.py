"""Tests for the execution primitive (core/executor.py).

The :class:`CommandRunner` is mocked; these tests verify the three
outcomes and the mapping onto ``ExternalToolError``/``OutputDecodeError``.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from op_wrap.core.executor import OpExecutor
from op_wrap.core.models import CommandResult
from op_wrap.exceptions import (
    ExternalToolError,
    OpNotFoundError,
    OutputDecodeError,
)


def _runner(exit_code: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    runner = MagicMock()
    runner.run.return_value = CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
    return runner


class TestRunVoid:
    def test_clean_exit_returns_none(self) -> None:
        runner = _runner()
        assert OpExecutor(runner).run_void("document delete d1 --vault v1") is None
        runner.run.assert_called_once_with("document delete d1 --vault v1")

    def test_non_zero_exit_carries_diagnostics_verbatim(self) -> None:
        stderr = "[ERROR] 2024/01/01 00:00:00 \"d1\" isn't a document\n"
        runner = _runner(exit_code=1, stderr=stderr)

        with pytest.raises(ExternalToolError) as exc_info:
            OpExecutor(runner).run_void("document delete d1 --vault v1")

        err = exc_info.value
        assert err.diagnostics == stderr
        assert err.exit_code == 1
        assert err.command == "document delete d1 --vault v1"
        assert str(err) == stderr.strip()

    def test_signal_exit_is_failure(self) -> None:
        result = CommandResult(exit_code=-9, stdout="", stderr="")
        assert not result.ok
        with pytest.raises(ExternalToolError, match="status -9"):
            OpExecutor(_runner(exit_code=-9)).run_void("document list")

    def test_empty_stderr_still_has_message(self) -> None:
        with pytest.raises(ExternalToolError, match="status 3"):
            OpExecutor(_runner(exit_code=3)).run_void("document list")

    def test_signin_hint(self) -> None:
        runner = _runner(exit_code=1, stderr="[ERROR] You are not currently signed in.")
        with pytest.raises(ExternalToolError) as exc_info:
            OpExecutor(runner).run_void("document list")
        assert exc_info.value.hint is not None
        assert "op signin" in exc_info.value.hint

    def test_our_errors_propagate_unchanged(self) -> None:
        runner = MagicMock()
        original = OpNotFoundError("op missing")
        runner.run.side_effect = original
        with pytest.raises(OpNotFoundError) as exc_info:
            OpExecutor(runner).run_void("document list")
        assert exc_info.value is original

    def test_unexpected_runner_error_wrapped(self) -> None:
        runner = MagicMock()
        original = RuntimeError("kaboom")
        runner.run.side_effect = original
        with pytest.raises(ExternalToolError, match="Unexpected") as exc_info:
            OpExecutor(runner).run_void("document list")
        assert exc_info.value.__cause__ is original


class TestRunJson:
    def test_decoder_receives_parsed_payload(self) -> None:
        decode = MagicMock(return_value="decoded")
        result = OpExecutor(_runner(stdout='[{"id": "a"}, {"id": "b"}]')).run_json("x", decode)
        assert result == "decoded"
        decode.assert_called_once_with([{"id": "a"}, {"id": "b"}])

    def test_tool_failure_is_not_decode_failure(self) -> None:
        decode = MagicMock()
        with pytest.raises(ExternalToolError):
            OpExecutor(_runner(exit_code=1, stdout="[]", stderr="nope")).run_json("x", decode)
        decode.assert_not_called()

    def test_invalid_json(self) -> None:
        with pytest.raises(OutputDecodeError, match="not valid JSON"):
            OpExecutor(_runner(stdout="not json")).run_json("x", lambda payload: payload)

    @pytest.mark.parametrize(
        "error",
        [KeyError("id"), TypeError("bad"), ValueError("bad"), AttributeError("get")],
    )
    def test_decoder_shape_errors_mapped(self, error: Exception) -> None:
        def decode(_: Any) -> None:
            raise error

        with pytest.raises(OutputDecodeError, match="unexpected data structure"):
            OpExecutor(_runner(stdout="{}")).run_json("x", decode)

    def test_get_on_non_object_payload(self) -> None:
        with pytest.raises(OutputDecodeError, match="unexpected data structure"):
            OpExecutor(_runner(stdout="[]")).run_json("x", lambda payload: payload.get("id"))

    def test_decoder_own_errors_propagate(self) -> None:
        def decode(_: Any) -> None:
            raise OutputDecodeError("custom")

        with pytest.raises(OutputDecodeError, match="custom"):
            OpExecutor(_runner(stdout="{}")).run_json("x", decode)
