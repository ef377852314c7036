"""Core / service layer — validation, command building and decoding.

Rules
-----
* No ``print()`` calls.
* No process spawning; the only filesystem access is the existence
  check on source files in :mod:`op_wrap.core.validation`.
* No imports from ``cli`` or ``infra``.
* Command builders and decoders are deterministic and stateless.
"""

from op_wrap.core.document_service import DocumentService
from op_wrap.core.executor import OpExecutor
from op_wrap.core.models import (
    Category,
    CommandResult,
    Document,
    DocumentDetails,
    DocumentReference,
    Template,
    TemplateField,
    TemplateInfo,
    TemplateReference,
    TemplateSection,
    VaultReference,
)
from op_wrap.core.protocols import CommandRunner
from op_wrap.core.template_service import TemplateService

__all__: list[str] = [
    "Category",
    "CommandResult",
    "CommandRunner",
    "Document",
    "DocumentDetails",
    "DocumentReference",
    "DocumentService",
    "OpExecutor",
    "Template",
    "TemplateField",
    "TemplateInfo",
    "TemplateReference",
    "TemplateSection",
    "TemplateService",
    "VaultReference",
]
