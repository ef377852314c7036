"""Core document service — ``op document`` operations.

Each public method follows the same pipeline:

1. Validate every argument (empty checks, then file existence).
2. Build the command string with :mod:`op_wrap.core.commands`.
3. Run it through the injected :class:`~op_wrap.core.executor.OpExecutor`.
4. Decode the output, where the command returns any.

Nothing is built or executed when validation fails.
"""

from __future__ import annotations

from collections.abc import Iterable

from op_wrap.core import commands
from op_wrap.core.executor import OpExecutor
from op_wrap.core.materializer import decode_document, decode_document_details_list
from op_wrap.core.models import Document, DocumentDetails, HasId
from op_wrap.core.validation import (
    optional_id,
    optional_tags,
    optional_text,
    require_existing_file,
    require_id,
    require_text,
)


class DocumentService:
    """Stateless service for listing, fetching and editing documents.

    Parameters
    ----------
    executor:
        The execution primitive every command is sent through.
    """

    def __init__(self, executor: OpExecutor) -> None:
        self._executor: OpExecutor = executor

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def get_documents(self, vault: HasId) -> list[DocumentDetails]:
        """List the documents in *vault*."""
        vault_id = require_id(vault, "vault")
        command = commands.document_list(vault_id)
        return self._executor.run_json(command, decode_document_details_list)

    def search_for_documents(
        self,
        vault: HasId | None = None,
        include_archive: bool | None = None,
    ) -> list[DocumentDetails]:
        """List documents across all vaults, or one vault when given."""
        vault_id = optional_id(vault, "vault")
        command = commands.document_list(vault_id, include_archive)
        return self._executor.run_json(command, decode_document_details_list)

    # ------------------------------------------------------------------
    # Retrieval: op writes the file itself
    # ------------------------------------------------------------------

    def get_document(
        self,
        document: HasId,
        vault: HasId,
        file_path: str,
        file_mode: str | None = None,
    ) -> None:
        """Download *document* from *vault* to *file_path*.

        An existing file at *file_path* is overwritten.
        """
        document_id = require_id(document, "document")
        vault_id = require_id(vault, "vault")
        out_file = require_text(file_path, "file_path")

        command = commands.document_get(
            document_id,
            out_file,
            vault_id,
            file_mode=optional_text(file_mode),
        )
        self._executor.run_void(command)

    def search_for_document(
        self,
        document: HasId,
        file_path: str,
        vault: HasId | None = None,
        include_archive: bool | None = None,
        file_mode: str | None = None,
    ) -> None:
        """Download *document* from any vault, overwriting *file_path*.

        *file_path* must already exist.

        Raises
        ------
        InvalidArgumentError
            If the document id, path or vault id is empty.
        SourceFileNotFoundError
            If *file_path* does not exist.
        """
        document_id = require_id(document, "document")
        out_file = require_text(file_path, "file_path")
        vault_id = optional_id(vault, "vault")
        require_existing_file(out_file, "file_path")

        command = commands.document_get(
            document_id,
            out_file,
            vault_id,
            include_archive=include_archive,
            file_mode=optional_text(file_mode),
        )
        self._executor.run_void(command)

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def create_document(
        self,
        vault: HasId | None,
        file_path: str,
        file_name: str | None = None,
        title: str | None = None,
        tags: str | Iterable[str] | None = None,
    ) -> Document:
        """Upload *file_path* as a new document.

        Raises
        ------
        InvalidArgumentError
            If the vault id or path is empty, or a tag is not a string.
        SourceFileNotFoundError
            If *file_path* does not exist.
        """
        vault_id = optional_id(vault, "vault")
        source = require_text(file_path, "file_path")
        tag_list = optional_tags(tags)
        require_existing_file(source, "file_path")

        command = commands.document_create(
            source,
            vault_id,
            file_name=optional_text(file_name),
            title=optional_text(title),
            tags=tag_list,
        )
        return self._executor.run_json(command, decode_document)

    def replace_document(
        self,
        document: HasId,
        vault: HasId,
        file_path: str,
        file_name: str | None = None,
        title: str | None = None,
        tags: str | Iterable[str] | None = None,
    ) -> None:
        """Replace the contents of *document* with *file_path*."""
        document_id = require_id(document, "document")
        vault_id = require_id(vault, "vault")
        source = require_text(file_path, "file_path")
        tag_list = optional_tags(tags)
        require_existing_file(source, "file_path")

        command = commands.document_edit(
            document_id,
            source,
            vault_id,
            file_name=optional_text(file_name),
            title=optional_text(title),
            tags=tag_list,
        )
        self._executor.run_void(command)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def archive_document(self, document: HasId, vault: HasId) -> None:
        """Move *document* to the archive."""
        document_id = require_id(document, "document")
        vault_id = require_id(vault, "vault")
        self._executor.run_void(commands.document_delete(document_id, vault_id, archive=True))

    def delete_document(self, document: HasId, vault: HasId) -> None:
        """Permanently delete *document*."""
        document_id = require_id(document, "document")
        vault_id = require_id(vault, "vault")
        self._executor.run_void(commands.document_delete(document_id, vault_id))
