"""Command builder — renders one canonical ``op`` command line per operation.

Every builder here is pure: same inputs, byte-identical output, no I/O.
Commands are assembled as an ordered list of discrete tokens and
joined by :meth:`CommandLine.render`; quoting happens in exactly one
place (:func:`quote`) so no call site can get it wrong.

Optional clauses are appended only when their value is supplied.  An
omitted clause leaves no flag and no blank value behind.
"""

from __future__ import annotations

from collections.abc import Iterable

_NEEDS_QUOTING: frozenset[str] = frozenset(" \t\r\n\"'\\")


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------

def quote(value: str) -> str:
    """Wrap *value* in double quotes, escaping ``\\`` and ``"``.

    The escaping is the POSIX double-quote form, which
    :func:`shlex.split` reverses exactly.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def bare(value: str) -> str:
    """Return *value* unquoted unless it would split or break quoting."""
    if not value or any(ch in _NEEDS_QUOTING for ch in value):
        return quote(value)
    return value


def join_tags(tags: Iterable[str] | None) -> str | None:
    """Comma-join the non-blank *tags*; ``None`` when none remain."""
    if tags is None:
        return None
    items = [tag.strip() for tag in tags if tag.strip()]
    if not items:
        return None
    return ",".join(items)


# ---------------------------------------------------------------------------
# Token builder
# ---------------------------------------------------------------------------

class CommandLine:
    """Ordered builder of ``op`` argument tokens.

    Usage::

        CommandLine("document", "list").option("--vault", "v1").render()
        # 'document list --vault v1'
    """

    def __init__(self, *words: str) -> None:
        self._tokens: list[str] = list(words)

    def arg(self, value: str) -> CommandLine:
        """Append a positional identifier."""
        self._tokens.append(bare(value))
        return self

    def quoted(self, value: str) -> CommandLine:
        """Append a positional free-text value, always quoted."""
        self._tokens.append(quote(value))
        return self

    def flag(self, name: str, enabled: bool | None = True) -> CommandLine:
        """Append ``name`` only when *enabled* is true."""
        if enabled:
            self._tokens.append(name)
        return self

    def option(
        self,
        name: str,
        value: str | None,
        *,
        quoted: bool = False,
    ) -> CommandLine:
        """Append ``name value`` only when *value* is not ``None``."""
        if value is None:
            return self
        self._tokens.append(name)
        self._tokens.append(quote(value) if quoted else bare(value))
        return self

    def render(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.render()


# ---------------------------------------------------------------------------
# Document commands
# ---------------------------------------------------------------------------

def document_list(
    vault_id: str | None = None,
    include_archive: bool | None = None,
) -> str:
    return (
        CommandLine("document", "list")
        .option("--vault", vault_id)
        .flag("--include-archive", include_archive)
        .render()
    )


def document_get(
    document_id: str,
    out_file: str,
    vault_id: str | None = None,
    *,
    include_archive: bool | None = None,
    file_mode: str | None = None,
) -> str:
    """Build ``document get``.

    ``--force`` is always present: without it ``op`` waits on a
    confirmation prompt when *out_file* already exists.
    """
    return (
        CommandLine("document", "get")
        .arg(document_id)
        .option("--out-file", out_file, quoted=True)
        .flag("--force")
        .option("--vault", vault_id)
        .flag("--include-archive", include_archive)
        .option("--file-mode", file_mode)
        .render()
    )


def document_create(
    file_path: str,
    vault_id: str | None = None,
    *,
    file_name: str | None = None,
    title: str | None = None,
    tags: Iterable[str] | None = None,
) -> str:
    return (
        CommandLine("document", "create")
        .quoted(file_path)
        .option("--vault", vault_id)
        .option("--file-name", file_name, quoted=True)
        .option("--title", title, quoted=True)
        .option("--tags", join_tags(tags), quoted=True)
        .render()
    )


def document_edit(
    document_id: str,
    file_path: str,
    vault_id: str,
    *,
    file_name: str | None = None,
    title: str | None = None,
    tags: Iterable[str] | None = None,
) -> str:
    return (
        CommandLine("document", "edit")
        .arg(document_id)
        .quoted(file_path)
        .option("--vault", vault_id)
        .option("--file-name", file_name, quoted=True)
        .option("--title", title, quoted=True)
        .option("--tags", join_tags(tags), quoted=True)
        .render()
    )


def document_delete(document_id: str, vault_id: str, *, archive: bool = False) -> str:
    return (
        CommandLine("document", "delete")
        .arg(document_id)
        .option("--vault", vault_id)
        .flag("--archive", archive)
        .render()
    )


# ---------------------------------------------------------------------------
# Template commands
# ---------------------------------------------------------------------------

def template_list() -> str:
    return CommandLine("item", "template", "list").render()


def template_get(name: str) -> str:
    return CommandLine("item", "template", "get").quoted(name).render()
