"""``op-wrap doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can drive the 1Password CLI.
"""

from __future__ import annotations

import platform
import sys

from op_wrap.cli import exit_codes
from op_wrap.cli.console import console
from op_wrap.config import OpSettings
from op_wrap.infra.op_detector import detect_op
from op_wrap.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _op_check(settings: OpSettings) -> tuple[str, str, str]:
    """Return (label, value, status) for the op binary row."""
    status = detect_op(settings.op_path)
    verdict = "[green]OK[/green]" if status.found else "[red]FAIL[/red]"
    return "op", status.status_text, verdict


def _account_check(settings: OpSettings) -> tuple[str, str, str]:
    """Return (label, value, status) for the configured account row."""
    return "account", settings.account or "default", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nop-wrap doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: OpSettings) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    checks = [
        ("op-wrap", __version__, "[green]OK[/green]"),
        _python_version_check(),
        _op_check(settings),
        _account_check(settings),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="op-wrap doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        console.print()
        console.print(table)
        console.print()

    # Show install guidance when op is missing.
    op_status = detect_op(settings.op_path)
    if not op_status.found and op_status.install_commands:
        console.print("The 1Password CLI is not installed.")
        console.print("Install using one of the following commands:\n")
        for cmd in op_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
