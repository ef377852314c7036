"""Shared pytest fixtures and configuration for the op-wrap test suite.

Guidelines
----------
* The real ``op`` binary is never executed.
* The command runner is mocked at the infra boundary.
* Source files live under ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from op_wrap.core.executor import OpExecutor
from op_wrap.core.models import CommandResult


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(exit_code=0, stdout=stdout, stderr="")


@pytest.fixture
def runner() -> MagicMock:
    """A fake :class:`CommandRunner` that succeeds with empty JSON list output."""
    fake = MagicMock()
    fake.run.return_value = ok("[]")
    return fake


@pytest.fixture
def executor(runner: MagicMock) -> OpExecutor:
    return OpExecutor(runner)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "a.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path
