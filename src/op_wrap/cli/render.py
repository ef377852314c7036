"""Rendering of command results for the terminal.

Lists become Rich tables; when Rich is missing a plain column layout is
printed instead.  All results go to stdout so they can be piped.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime

from op_wrap.cli.console import out
from op_wrap.core.models import Document, DocumentDetails, Template, TemplateInfo


def _fmt_time(value: datetime | None) -> str:
    return value.isoformat(timespec="seconds") if value is not None else "-"


def _table(title: str, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        print(title, file=sys.stdout)
        print("  ".join(columns), file=sys.stdout)
        for row in rows:
            print("  ".join(row), file=sys.stdout)
        return

    table = Table(title=title, show_header=True, header_style="bold cyan", border_style="dim")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    out.print(table)


def render_document_list(documents: Sequence[DocumentDetails]) -> None:
    rows = [
        (
            doc.id,
            doc.title,
            (doc.vault.name or doc.vault.id) if doc.vault else "-",
            doc.file_name or "-",
            _fmt_time(doc.updated_at),
        )
        for doc in documents
    ]
    _table("Documents", ("ID", "Title", "Vault", "File", "Updated"), rows)


def render_document(document: Document) -> None:
    rows = [
        ("id", document.id),
        ("vault", document.vault_id or "-"),
        ("created", _fmt_time(document.created_at)),
        ("updated", _fmt_time(document.updated_at)),
    ]
    _table("Document created", ("Field", "Value"), rows)


def render_template_list(templates: Sequence[TemplateInfo]) -> None:
    _table("Templates", ("ID", "Name"), [(t.id, t.name) for t in templates])


def render_template(template: Template) -> None:
    sections = {section.id: section.label or section.id for section in template.sections}
    rows = [
        (
            field.label or field.id,
            field.type,
            sections.get(field.section_id, "-") if field.section_id else "-",
            field.purpose or "",
        )
        for field in template.fields
    ]
    _table(
        f"{template.name} ({template.category.value})",
        ("Field", "Type", "Section", "Purpose"),
        rows,
    )
