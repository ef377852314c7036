"""Custom exception hierarchy for op-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`OpWrapError`.  Raw ``subprocess``/``OSError`` failures must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
OpWrapError
├── InvalidArgumentError
├── SourceFileNotFoundError
├── ExternalToolError
├── OutputDecodeError
└── EnvironmentError
    └── OpNotFoundError
"""

from __future__ import annotations


class OpWrapError(Exception):
    """Base exception for all op-wrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Local validation ------------------------------------------------------

class InvalidArgumentError(OpWrapError, ValueError):
    """Raised when a caller-supplied argument is missing or empty.

    Detected locally; the ``op`` binary is never invoked.
    """

    def __init__(
        self,
        message: str,
        *,
        param: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.param: str = param
        """Name of the offending parameter."""


class SourceFileNotFoundError(OpWrapError):
    """Raised when a file that ``op`` must read does not exist."""

    def __init__(self, path: str, *, param: str) -> None:
        super().__init__(
            f"File '{path}' was not found or could not be accessed.",
            hint="Check the path and the file permissions.",
        )
        self.path: str = path
        self.param: str = param


# --- External tool ---------------------------------------------------------

class ExternalToolError(OpWrapError):
    """Raised when ``op`` ran and reported a failure.

    :attr:`diagnostics` holds the tool's stderr exactly as emitted.
    """

    def __init__(
        self,
        diagnostics: str,
        *,
        exit_code: int | None = None,
        command: str | None = None,
        hint: str | None = None,
    ) -> None:
        message = diagnostics.strip() or f"op exited with status {exit_code}."
        super().__init__(message, hint=hint)
        self.diagnostics: str = diagnostics
        self.exit_code: int | None = exit_code
        self.command: str | None = command


class OutputDecodeError(OpWrapError):
    """Raised when ``op`` succeeded but its output could not be decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(OpWrapError):
    """Raised when a required runtime dependency is not available."""


class OpNotFoundError(EnvironmentError):
    """Raised when the ``op`` binary cannot be located or started."""


def append_signin_suggestion(hint: str | None) -> str:
    """Append ``op signin`` guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "If you are not signed in, run:"
    if hint and marker in hint:
        return hint
    lines = [hint] if hint else []
    lines.extend((marker, "    eval $(op signin)"))
    return "\n".join(lines)
