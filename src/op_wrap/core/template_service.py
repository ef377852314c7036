"""Core template service — ``op item template`` operations."""

from __future__ import annotations

from op_wrap.core import commands
from op_wrap.core.executor import OpExecutor
from op_wrap.core.materializer import (
    decode_template,
    decode_template_info_list,
    with_requested_name,
)
from op_wrap.core.models import Category, HasName, Template, TemplateInfo
from op_wrap.core.validation import require_concrete_category, require_template_name


class TemplateService:
    """Stateless service for listing and fetching item templates.

    Parameters
    ----------
    executor:
        The execution primitive every command is sent through.
    """

    def __init__(self, executor: OpExecutor) -> None:
        self._executor: OpExecutor = executor

    def get_templates(self) -> list[TemplateInfo]:
        return self._executor.run_json(commands.template_list(), decode_template_info_list)

    def get_template(self, template: str | HasName | Category) -> Template:
        """Fetch one template by name, by reference or by category.

        The returned record's ``name`` is always the requested name (or
        the category's tool spelling), whatever the payload carried.

        Raises
        ------
        InvalidArgumentError
            If the name is empty, or *template* is
            :attr:`Category.UNKNOWN` / :attr:`Category.CUSTOM`.
        """
        if isinstance(template, Category):
            name = require_concrete_category(template)
        else:
            param = "name" if isinstance(template, str) else "template"
            name = require_template_name(template, param)

        result = self._executor.run_json(commands.template_get(name), decode_template)
        return with_requested_name(result, name)
