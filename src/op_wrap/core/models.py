"""Domain models for op-wrap.

All records are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


# ---------------------------------------------------------------------------
# Reference protocols
# ---------------------------------------------------------------------------

class HasId(Protocol):
    """Anything that identifies a vault or document by ``id``."""

    @property
    def id(self) -> str | None: ...  # pragma: no cover


class HasName(Protocol):
    """Anything that identifies a template by ``name``."""

    @property
    def name(self) -> str: ...  # pragma: no cover


# ---------------------------------------------------------------------------
# References supplied by the caller
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VaultReference:
    """A vault, known only by its identifier (ID or name)."""

    id: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class DocumentReference:
    """A document, known only by its identifier."""

    id: str | None = None


@dataclass(frozen=True, slots=True)
class TemplateReference:
    """A template, known only by its name."""

    name: str


class Category(Enum):
    """Item categories understood by ``op item template get``.

    Values use the tool's own spelling.  ``UNKNOWN`` and ``CUSTOM`` are
    sentinels and never name a real template.
    """

    API_CREDENTIAL = "API Credential"
    BANK_ACCOUNT = "Bank Account"
    CREDIT_CARD = "Credit Card"
    CRYPTO_WALLET = "Crypto Wallet"
    DATABASE = "Database"
    DOCUMENT = "Document"
    DRIVER_LICENSE = "Driver License"
    EMAIL_ACCOUNT = "Email Account"
    IDENTITY = "Identity"
    LOGIN = "Login"
    MEDICAL_RECORD = "Medical Record"
    MEMBERSHIP = "Membership"
    OUTDOOR_LICENSE = "Outdoor License"
    PASSPORT = "Passport"
    PASSWORD = "Password"
    REWARD_PROGRAM = "Reward Program"
    SECURE_NOTE = "Secure Note"
    SERVER = "Server"
    SOCIAL_SECURITY_NUMBER = "Social Security Number"
    SOFTWARE_LICENSE = "Software License"
    SSH_KEY = "SSH Key"
    WIRELESS_ROUTER = "Wireless Router"
    CUSTOM = "Custom"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str) -> Category:
        """Map a tool-reported category (``"SECURE_NOTE"`` or ``"Secure Note"``)."""
        normalized = raw.strip().replace(" ", "_").upper()
        for member in cls:
            if member.name == normalized:
                return member
        return cls.CUSTOM if normalized else cls.UNKNOWN


# ---------------------------------------------------------------------------
# Document records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DocumentDetails:
    """One row of ``op document list``."""

    id: str
    title: str
    version: int | None
    vault: VaultReference | None
    last_edited_by: str | None
    created_at: datetime | None
    updated_at: datetime | None
    file_name: str | None = None
    content_size: int | None = None


@dataclass(frozen=True, slots=True)
class Document:
    """Result of ``op document create``."""

    id: str
    vault_id: str | None
    created_at: datetime | None
    updated_at: datetime | None


# ---------------------------------------------------------------------------
# Template records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TemplateInfo:
    """One row of ``op item template list``."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class TemplateSection:
    """A named group of fields inside a template."""

    id: str
    label: str | None


@dataclass(frozen=True, slots=True)
class TemplateField:
    """A single field descriptor inside a template."""

    id: str
    type: str
    label: str | None
    purpose: str | None = None
    value: str | None = None
    section_id: str | None = None


@dataclass(frozen=True, slots=True)
class Template:
    """Result of ``op item template get``.

    ``name`` is filled from the caller's request after decoding; the
    tool does not echo it back reliably.
    """

    name: str
    title: str
    category: Category
    fields: tuple[TemplateField, ...] = ()
    sections: tuple[TemplateSection, ...] = ()


# ---------------------------------------------------------------------------
# Process outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one ``op`` invocation."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
