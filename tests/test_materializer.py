"""Tests for the result materializer (core/materializer.py).

Payloads mirror the JSON emitted by ``op`` 2.x.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from op_wrap.core.materializer import (
    decode_document,
    decode_document_details_list,
    decode_template,
    decode_template_info_list,
    with_requested_name,
)
from op_wrap.core.models import Category, Template, VaultReference
from op_wrap.exceptions import OutputDecodeError


def _doc_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": "d1",
        "title": "Passport scan",
        "version": 2,
        "vault": {"id": "v1", "name": "Private"},
        "last_edited_by": "U1",
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-02T11:30:00Z",
        "overview": {"file_name": "passport.pdf", "content_size": 1024},
    }
    row.update(overrides)
    return row


class TestDocumentDetails:
    def test_full_row(self) -> None:
        [doc] = decode_document_details_list([_doc_row()])
        assert doc.id == "d1"
        assert doc.title == "Passport scan"
        assert doc.version == 2
        assert doc.vault == VaultReference(id="v1", name="Private")
        assert doc.last_edited_by == "U1"
        assert doc.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        assert doc.file_name == "passport.pdf"
        assert doc.content_size == 1024

    def test_order_preserved(self) -> None:
        docs = decode_document_details_list([_doc_row(id="b"), _doc_row(id="a")])
        assert [d.id for d in docs] == ["b", "a"]

    def test_optional_fields_missing(self) -> None:
        [doc] = decode_document_details_list([{"id": "d1"}])
        assert doc.title == ""
        assert doc.vault is None
        assert doc.created_at is None
        assert doc.file_name is None

    def test_empty_list(self) -> None:
        assert decode_document_details_list([]) == []

    def test_not_a_list(self) -> None:
        with pytest.raises(OutputDecodeError, match="JSON array"):
            decode_document_details_list({"id": "d1"})

    def test_missing_id(self) -> None:
        with pytest.raises(OutputDecodeError, match="'id'"):
            decode_document_details_list([{"title": "x"}])

    @pytest.mark.parametrize(
        ("stamp", "micros"),
        [
            ("2024-03-01T10:00:00.5Z", 500000),
            ("2024-03-01T10:00:00.12345Z", 123450),
            ("2024-03-01T10:00:00.123456789Z", 123456),
        ],
    )
    def test_fractional_seconds_any_width(self, stamp: str, micros: int) -> None:
        [doc] = decode_document_details_list([_doc_row(created_at=stamp)])
        assert doc.created_at == datetime(2024, 3, 1, 10, 0, 0, micros, tzinfo=timezone.utc)

    def test_bad_timestamp(self) -> None:
        with pytest.raises(OutputDecodeError, match="timestamp"):
            decode_document_details_list([_doc_row(created_at="yesterday")])


class TestDocument:
    def test_create_output(self) -> None:
        doc = decode_document(
            {
                "uuid": "d9",
                "createdAt": "2024-03-01T10:00:00Z",
                "updatedAt": "2024-03-01T10:00:00Z",
                "vaultUuid": "v1",
            }
        )
        assert doc.id == "d9"
        assert doc.vault_id == "v1"
        assert doc.created_at is not None

    def test_not_an_object(self) -> None:
        with pytest.raises(OutputDecodeError):
            decode_document([])


class TestTemplates:
    def test_info_list(self) -> None:
        infos = decode_template_info_list(
            [{"uuid": "001", "name": "Login"}, {"uuid": "003", "name": "Secure Note"}]
        )
        assert [(i.id, i.name) for i in infos] == [("001", "Login"), ("003", "Secure Note")]

    def test_info_missing_name(self) -> None:
        with pytest.raises(OutputDecodeError):
            decode_template_info_list([{"uuid": "001"}])

    def test_template(self) -> None:
        template = decode_template(
            {
                "title": "",
                "category": "LOGIN",
                "sections": [{"id": "add more", "label": "Extra"}],
                "fields": [
                    {"id": "username", "type": "STRING", "purpose": "USERNAME", "label": "username"},
                    {
                        "id": "pin",
                        "type": "CONCEALED",
                        "label": "PIN",
                        "section": {"id": "add more"},
                    },
                ],
            }
        )
        assert template.name == ""
        assert template.category is Category.LOGIN
        assert [f.id for f in template.fields] == ["username", "pin"]
        assert template.fields[0].purpose == "USERNAME"
        assert template.fields[1].section_id == "add more"
        assert template.sections[0].label == "Extra"

    def test_template_unknown_category(self) -> None:
        assert decode_template({"category": "SPACESHIP"}).category is Category.CUSTOM

    def test_template_fields_not_list(self) -> None:
        with pytest.raises(OutputDecodeError):
            decode_template({"fields": "nope"})


class TestWithRequestedName:
    def test_overwrites_name(self) -> None:
        original = Template(name="wrong", title="", category=Category.LOGIN)
        result = with_requested_name(original, "Login")
        assert result.name == "Login"
        assert result.category is Category.LOGIN
        assert original.name == "wrong"
