"""Locate the 1Password CLI and suggest how to install it.

Lookup goes through :func:`shutil.which`, so *op_path* may be a bare
command name resolved on ``PATH`` or an explicit location.  Nothing is
executed and nothing is printed; :mod:`op_wrap.cli.doctor` and the
runner's error hints decide how to present the result.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

_DOCS_URL = "https://developer.1password.com/docs/cli/get-started/"

# platform.system().lower() -> package-manager commands for 1password-cli.
_INSTALL_COMMANDS: dict[str, tuple[str, ...]] = {
    "darwin": ("brew install --cask 1password-cli",),
    "linux": ("sudo apt install 1password-cli", "sudo dnf install 1password-cli"),
    "windows": ("winget install AgileBits.1Password.CLI", "scoop install 1password-cli"),
}


@dataclass(frozen=True, slots=True)
class OpStatus:
    """Where ``op`` was found, if anywhere.

    ``status_text`` is a one-line summary for display.
    ``install_commands`` is empty when the binary is present.
    """

    found: bool
    path: Path | None
    status_text: str
    install_commands: tuple[str, ...]


def detect_op(op_path: str = "op") -> OpStatus:
    """Resolve *op_path* without raising when it is missing."""
    located = shutil.which(op_path)
    if located is None:
        return OpStatus(
            found=False,
            path=None,
            status_text=f"{op_path} not found",
            install_commands=_platform_install_commands(),
        )
    resolved = Path(located).resolve()
    return OpStatus(found=True, path=resolved, status_text=str(resolved), install_commands=())


def install_hint() -> str:
    """Install guidance attached to :class:`~op_wrap.exceptions.OpNotFoundError`."""
    lines = ["Install the 1Password CLI using one of:"]
    lines.extend(f"  {cmd}" for cmd in _platform_install_commands())
    lines.append("Or set OP_WRAP_OP_PATH to the location of the op binary.")
    return "\n".join(lines)


def _platform_install_commands() -> tuple[str, ...]:
    return _INSTALL_COMMANDS.get(platform.system().lower(), (f"See {_DOCS_URL}",))
