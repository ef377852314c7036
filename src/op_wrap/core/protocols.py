"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from op_wrap.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for backends that execute an ``op`` command string.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).  Tests substitute a fake here instead of touching the
    real binary.
    """

    def run(self, command: str) -> CommandResult:
        """Execute *command* and return its exit code and captured output.

        *command* is the argument line without the binary name, e.g.
        ``document list --vault v1``.  A non-zero exit must be reported
        through :attr:`CommandResult.exit_code`, not raised.

        Raises
        ------
        OpNotFoundError
            When the ``op`` binary cannot be started at all.
        """
        ...  # pragma: no cover
