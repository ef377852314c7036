"""op-wrap — typed façade over the 1Password ``op`` command-line tool.

Builds ``op`` command strings for document and template operations,
runs the binary, and decodes its JSON output into frozen records.
"""

from op_wrap.version import __version__

__all__: list[str] = ["__version__"]
