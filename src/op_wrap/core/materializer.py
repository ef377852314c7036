"""Result materializer — decoded ``op`` JSON → domain records.

The decoders accept the value produced by :func:`json.loads` and raise
:class:`~op_wrap.exceptions.OutputDecodeError` when its shape is wrong.
Optional keys fall back to ``None``; required keys do not.

The template name back-fill lives in :func:`with_requested_name`, not
in the decoder: ``op item template get`` does not reliably echo the
requested name, so the caller's value is applied as a separate step.
"""

from __future__ import annotations

import dataclasses
import re
from datetime import datetime
from typing import Any

from op_wrap.core.models import (
    Category,
    Document,
    DocumentDetails,
    Template,
    TemplateField,
    TemplateInfo,
    TemplateSection,
    VaultReference,
)
from op_wrap.exceptions import OutputDecodeError

# Fractional seconds of any width; fromisoformat() before 3.11 takes only 3 or 6.
_FRACTION = re.compile(r"\.(\d+)")


# ---------------------------------------------------------------------------
# Shape helpers
# ---------------------------------------------------------------------------

def _expect_list(payload: Any, what: str) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        raise OutputDecodeError(f"Expected a JSON array of {what}, got {type(payload).__name__}.")
    for entry in payload:
        if not isinstance(entry, dict):
            raise OutputDecodeError(f"Expected every {what} entry to be a JSON object.")
    return payload


def _expect_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise OutputDecodeError(f"Expected a JSON object for {what}, got {type(payload).__name__}.")
    return payload


def _required_str(raw: dict[str, Any], *keys: str) -> str:
    """Return the first of *keys* present as a string."""
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str):
            return value
    raise OutputDecodeError(f"Missing required field {keys[0]!r} in op output.")


def _optional_str(raw: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return str(value)
    return None


def _optional_int(raw: dict[str, Any], key: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise OutputDecodeError(f"Field {key!r} is not an integer: {value!r}") from exc


def _timestamp(raw: dict[str, Any], *keys: str) -> datetime | None:
    text = _optional_str(raw, *keys)
    if text is None:
        return None
    # fromisoformat() before 3.11 rejects the trailing "Z" op emits.
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise OutputDecodeError(f"Unparseable timestamp in op output: {text!r}") from exc


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def _parse_document_details(raw: dict[str, Any]) -> DocumentDetails:
    vault_raw = raw.get("vault")
    vault: VaultReference | None = None
    if isinstance(vault_raw, dict) and isinstance(vault_raw.get("id"), str):
        vault = VaultReference(id=vault_raw["id"], name=_optional_str(vault_raw, "name"))

    overview = raw.get("overview")
    file_name: str | None = None
    content_size: int | None = None
    if isinstance(overview, dict):
        file_name = _optional_str(overview, "file_name", "fileName")
        content_size = _optional_int(overview, "content_size")

    return DocumentDetails(
        id=_required_str(raw, "id"),
        title=_optional_str(raw, "title") or "",
        version=_optional_int(raw, "version"),
        vault=vault,
        last_edited_by=_optional_str(raw, "last_edited_by"),
        created_at=_timestamp(raw, "created_at"),
        updated_at=_timestamp(raw, "updated_at"),
        file_name=file_name,
        content_size=content_size,
    )


def decode_document_details_list(payload: Any) -> list[DocumentDetails]:
    """Decode ``op document list`` output, keeping the tool's order."""
    return [_parse_document_details(raw) for raw in _expect_list(payload, "documents")]


def decode_document(payload: Any) -> Document:
    """Decode ``op document create`` output."""
    raw = _expect_object(payload, "document")
    return Document(
        id=_required_str(raw, "uuid", "id"),
        vault_id=_optional_str(raw, "vaultUuid", "vault_id"),
        created_at=_timestamp(raw, "createdAt", "created_at"),
        updated_at=_timestamp(raw, "updatedAt", "updated_at"),
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def decode_template_info_list(payload: Any) -> list[TemplateInfo]:
    """Decode ``op item template list`` output, keeping the tool's order."""
    return [
        TemplateInfo(
            id=_required_str(raw, "uuid", "id"),
            name=_required_str(raw, "name"),
        )
        for raw in _expect_list(payload, "templates")
    ]


def _parse_field(raw: dict[str, Any]) -> TemplateField:
    section = raw.get("section")
    section_id = _optional_str(section, "id") if isinstance(section, dict) else None
    return TemplateField(
        id=_required_str(raw, "id"),
        type=_optional_str(raw, "type") or "STRING",
        label=_optional_str(raw, "label"),
        purpose=_optional_str(raw, "purpose"),
        value=_optional_str(raw, "value"),
        section_id=section_id,
    )


def decode_template(payload: Any) -> Template:
    """Decode ``op item template get`` output.

    ``name`` is left as whatever the payload carries (often absent);
    callers back-fill it with :func:`with_requested_name`.
    """
    raw = _expect_object(payload, "template")
    fields = raw.get("fields") or []
    sections = raw.get("sections") or []
    return Template(
        name=_optional_str(raw, "name") or "",
        title=_optional_str(raw, "title") or "",
        category=Category.parse(_optional_str(raw, "category") or ""),
        fields=tuple(_parse_field(entry) for entry in _expect_list(fields, "fields")),
        sections=tuple(
            TemplateSection(id=_required_str(entry, "id"), label=_optional_str(entry, "label"))
            for entry in _expect_list(sections, "sections")
        ),
    )


# ---------------------------------------------------------------------------
# Post-processing
# ---------------------------------------------------------------------------

def with_requested_name(template: Template, name: str) -> Template:
    """Return *template* with ``name`` set to the caller's requested name."""
    return dataclasses.replace(template, name=name)
