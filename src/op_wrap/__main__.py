"""Allow ``python -m op_wrap`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m op_wrap`` behaves identically to the ``op-wrap``
console script.
"""

from __future__ import annotations

from op_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
