"""Infrastructure layer — external system integration.

This layer wraps all interaction with the ``op`` binary and the
operating system.  Every raw ``OSError`` must be caught here and
re-raised as an :class:`~op_wrap.exceptions.OpWrapError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from op_wrap.infra.op_detector import OpStatus, detect_op, install_hint
from op_wrap.infra.op_runner import SubprocessOpRunner

__all__: list[str] = [
    "OpStatus",
    "SubprocessOpRunner",
    "detect_op",
    "install_hint",
]
