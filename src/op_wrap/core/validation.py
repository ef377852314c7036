"""Validation layer — rejects malformed input before a command is built.

Each public operation calls these guards in a fixed order: every
null/empty check first, then filesystem existence checks.  Nothing is
built or executed until all guards for a call have passed.

* Identifiers (vault id, document id) are compared raw — no trimming.
* Free text destined for the filesystem (paths, file names, titles) is
  trimmed, and must be non-empty when required.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from op_wrap.core.models import Category, HasId, HasName
from op_wrap.exceptions import InvalidArgumentError, SourceFileNotFoundError


def require_id(ref: HasId | None, param: str) -> str:
    """Return ``ref.id`` or raise :class:`InvalidArgumentError` naming *param*."""
    if ref is None:
        raise InvalidArgumentError(f"{param} cannot be None.", param=param)
    ref_id = getattr(ref, "id", None)
    if ref_id is None or len(ref_id) == 0:
        raise InvalidArgumentError(f"{param}.id cannot be empty.", param=param)
    return ref_id


def optional_id(ref: HasId | None, param: str) -> str | None:
    """Like :func:`require_id`, but ``None`` passes through."""
    if ref is None:
        return None
    return require_id(ref, param)


def require_text(value: str | None, param: str) -> str:
    """Return *value* trimmed, rejecting ``None`` and blank strings."""
    if value is None:
        raise InvalidArgumentError(f"{param} cannot be None.", param=param)
    trimmed = value.strip()
    if not trimmed:
        raise InvalidArgumentError(f"{param} cannot be empty.", param=param)
    return trimmed


def optional_text(value: str | None) -> str | None:
    """Trim an optional value; blank counts as not supplied."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def optional_tags(tags: str | Iterable[str] | None, param: str = "tags") -> list[str] | None:
    """Trim each tag and drop blanks; ``None`` when nothing is left.

    A bare string is one tag, not a sequence of characters.
    """
    if tags is None:
        return None
    if isinstance(tags, str):
        tags = [tags]
    cleaned: list[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise InvalidArgumentError(
                f"{param} must contain only strings, got {type(tag).__name__}.",
                param=param,
            )
        trimmed = tag.strip()
        if trimmed:
            cleaned.append(trimmed)
    return cleaned or None


def require_existing_file(path: str, param: str) -> None:
    """Raise :class:`SourceFileNotFoundError` unless *path* is a file."""
    if not Path(path).is_file():
        raise SourceFileNotFoundError(path, param=param)


def require_template_name(target: str | HasName | None, param: str) -> str:
    """Return the template name carried by *target* (raw, untrimmed)."""
    if target is None:
        raise InvalidArgumentError(f"{param} cannot be None.", param=param)
    name = target if isinstance(target, str) else getattr(target, "name", None)
    if name is None or len(name) == 0:
        label = param if isinstance(target, str) else f"{param}.name"
        raise InvalidArgumentError(f"{label} cannot be empty.", param=param)
    return name


def require_concrete_category(category: Category, param: str = "category") -> str:
    """Return the tool spelling of *category*, rejecting the sentinels."""
    if category in (Category.UNKNOWN, Category.CUSTOM):
        raise InvalidArgumentError(
            f"{param} cannot be {Category.UNKNOWN.value} or {Category.CUSTOM.value}.",
            param=param,
        )
    return category.value
