"""Subprocess-backed implementation of :class:`~op_wrap.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns the
``op`` binary.  ``OSError``s from process creation are caught here and
re-raised as typed :class:`~op_wrap.exceptions.OpWrapError`
subclasses — nothing raw escapes the infrastructure boundary.

A non-zero exit is *not* an exception at this level; it is reported in
the returned :class:`~op_wrap.core.models.CommandResult` and mapped by
the core executor.
"""

from __future__ import annotations

import logging
import shlex
import subprocess

from op_wrap.config import OpSettings
from op_wrap.core.models import CommandResult
from op_wrap.exceptions import ExternalToolError, InvalidArgumentError, OpNotFoundError
from op_wrap.infra.op_detector import install_hint

logger = logging.getLogger(__name__)

# Appended to every call so stdout is machine-readable.
_GLOBAL_FLAGS: tuple[str, ...] = ("--format", "json", "--no-color")


class SubprocessOpRunner:
    """Concrete :class:`CommandRunner` that runs ``op`` via :mod:`subprocess`.

    Usage::

        runner = SubprocessOpRunner.from_settings(get_settings())
        result = runner.run("item template list")

    The call blocks until ``op`` exits; no timeout is applied.
    """

    def __init__(self, op_path: str = "op", *, account: str | None = None) -> None:
        self._op_path: str = op_path
        self._account: str | None = account

    @classmethod
    def from_settings(cls, settings: OpSettings) -> SubprocessOpRunner:
        return cls(settings.op_path, account=settings.account)

    # ------------------------------------------------------------------
    # argv construction
    # ------------------------------------------------------------------

    def build_argv(self, command: str) -> list[str]:
        """Split *command* and wrap it with the binary and global flags."""
        try:
            tokens = shlex.split(command)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Command could not be tokenised: {exc}",
                param="command",
            ) from exc

        argv = [self._op_path, *tokens, *_GLOBAL_FLAGS]
        if self._account is not None:
            argv.extend(("--account", self._account))
        return argv

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(self, command: str) -> CommandResult:
        """Run *command* and capture its exit code, stdout and stderr.

        Raises
        ------
        OpNotFoundError
            When the binary is missing or not executable.
        ExternalToolError
            For any other failure to start the process.
        """
        argv = self.build_argv(command)
        logger.debug("Running op: %s", command)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except (FileNotFoundError, PermissionError) as exc:
            raise OpNotFoundError(
                f"Could not start '{self._op_path}': {exc.strerror or exc}",
                hint=install_hint(),
            ) from exc
        except OSError as exc:
            raise ExternalToolError(
                f"Failed to run '{self._op_path}': {exc}",
                command=command,
            ) from exc

        if completed.returncode != 0:
            logger.warning(
                "op exited with status %d for '%s': %s",
                completed.returncode,
                command,
                completed.stderr.strip(),
            )

        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
