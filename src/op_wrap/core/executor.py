"""Execution primitive — the single chokepoint for running ``op``.

:class:`OpExecutor` hands a command string to an injected
:class:`~op_wrap.core.protocols.CommandRunner` and turns the outcome
into one of:

* nothing (:meth:`OpExecutor.run_void`) — side-effecting commands,
  including ``document get`` where ``op`` writes the file itself;
* a decoded value (:meth:`OpExecutor.run_json`) — list/get commands.

Guarantees
----------
* Only :class:`~op_wrap.exceptions.OpWrapError` subclasses escape.
* A non-zero exit always becomes :class:`ExternalToolError`; a bad
  payload from a clean exit always becomes :class:`OutputDecodeError`.
* No retries — a repeated ``document create`` would duplicate data.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from op_wrap.core.models import CommandResult
from op_wrap.core.protocols import CommandRunner
from op_wrap.exceptions import (
    ExternalToolError,
    OpWrapError,
    OutputDecodeError,
    append_signin_suggestion,
)

T = TypeVar("T")

# Substrings in op diagnostics that mean the session is missing/expired.
_SIGNIN_SIGNALS: tuple[str, ...] = (
    "not currently signed in",
    "session expired",
    "authorization prompt dismissed",
    "no accounts configured",
)


class OpExecutor:
    """Run ``op`` command strings through a :class:`CommandRunner`.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_void(self, command: str) -> None:
        """Run *command* and confirm a clean exit."""
        self._execute(command)

    def run_json(self, command: str, decode: Callable[[Any], T]) -> T:
        """Run *command*, parse stdout as JSON and pass it to *decode*.

        Raises
        ------
        ExternalToolError
            When ``op`` exits non-zero.
        OutputDecodeError
            When stdout is not JSON or *decode* rejects its shape.
        """
        result = self._execute(command)
        try:
            payload: Any = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise OutputDecodeError(
                f"op returned output that is not valid JSON: {exc}",
            ) from exc

        try:
            return decode(payload)
        except OpWrapError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise OutputDecodeError(
                f"op returned an unexpected data structure: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Runner delegation (safe boundary)
    # ------------------------------------------------------------------

    def _execute(self, command: str) -> CommandResult:
        try:
            result = self._runner.run(command)
        except OpWrapError:
            # Already one of ours.
            raise
        except Exception as exc:
            raise ExternalToolError(
                f"Unexpected runner error: {exc}",
                command=command,
            ) from exc

        if not result.ok:
            raise ExternalToolError(
                result.stderr,
                exit_code=result.exit_code,
                command=command,
                hint=self._hint_for(result.stderr),
            )
        return result

    @staticmethod
    def _hint_for(diagnostics: str) -> str | None:
        lowered = diagnostics.lower()
        if any(signal in lowered for signal in _SIGNIN_SIGNALS):
            return append_signin_suggestion(None)
        return None
