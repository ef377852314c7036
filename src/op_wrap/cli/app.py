"""CLI application entry point and command routing for op-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~op_wrap.exceptions.OpWrapError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and the infrastructure runner.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from op_wrap.cli import exit_codes
from op_wrap.cli.console import configure_logging, console
from op_wrap.config import OpSettings, get_settings
from op_wrap.exceptions import OpWrapError
from op_wrap.version import __version__

if TYPE_CHECKING:
    from op_wrap.core.executor import OpExecutor


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_document_text_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file-name", default=None, help="Name stored for the file.")
    parser.add_argument("--title", default=None, help="Document item title.")
    parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Tag to attach (repeatable).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="op-wrap",
        description="Typed wrapper around the 1Password CLI for documents and templates.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="group")

    sub.add_parser("doctor", help="Check the local environment.")

    # -- documents ---------------------------------------------------------
    docs = sub.add_parser("documents", help="Manage document items.")
    docs_sub = docs.add_subparsers(dest="action", required=True)

    p = docs_sub.add_parser("list", help="List documents.")
    p.add_argument("--vault", default=None)
    p.add_argument("--include-archive", action="store_true")

    p = docs_sub.add_parser("get", help="Download a document to a file.")
    p.add_argument("document_id")
    p.add_argument("out_file")
    p.add_argument(
        "--vault",
        default=None,
        help="Omit to search every vault (OUT_FILE must then already exist).",
    )
    p.add_argument(
        "--include-archive",
        action="store_true",
        help="Also search archived items (OUT_FILE must already exist, even with --vault).",
    )
    p.add_argument("--file-mode", default=None, help="Permissions for the written file.")

    p = docs_sub.add_parser("create", help="Upload a file as a new document.")
    p.add_argument("file_path")
    p.add_argument("--vault", default=None)
    _add_document_text_options(p)

    p = docs_sub.add_parser("replace", help="Replace a document's file.")
    p.add_argument("document_id")
    p.add_argument("file_path")
    p.add_argument("--vault", required=True)
    _add_document_text_options(p)

    for action, help_text in (("archive", "Archive a document."), ("delete", "Delete a document.")):
        p = docs_sub.add_parser(action, help=help_text)
        p.add_argument("document_id")
        p.add_argument("--vault", required=True)

    # -- templates ---------------------------------------------------------
    templates = sub.add_parser("templates", help="Inspect item templates.")
    tpl_sub = templates.add_subparsers(dest="action", required=True)
    tpl_sub.add_parser("list", help="List item templates.")
    p = tpl_sub.add_parser("get", help="Show one item template.")
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument("name", nargs="?", default=None)
    target.add_argument("--category", default=None, help="Category, e.g. 'Login'.")

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_executor(settings: OpSettings) -> OpExecutor:
    from op_wrap.core.executor import OpExecutor
    from op_wrap.infra.op_runner import SubprocessOpRunner

    return OpExecutor(SubprocessOpRunner.from_settings(settings))


def _handle_documents(args: argparse.Namespace, settings: OpSettings) -> int:
    """Dispatch ``op-wrap documents <action>``."""
    from op_wrap.cli.render import render_document, render_document_list
    from op_wrap.core.document_service import DocumentService
    from op_wrap.core.models import DocumentReference, VaultReference

    service = DocumentService(_build_executor(settings))
    vault = VaultReference(args.vault) if args.vault is not None else None

    if args.action == "list":
        render_document_list(
            service.search_for_documents(vault, include_archive=args.include_archive),
        )
        return exit_codes.SUCCESS

    if args.action == "create":
        document = service.create_document(
            vault,
            args.file_path,
            file_name=args.file_name,
            title=args.title,
            tags=args.tags,
        )
        render_document(document)
        return exit_codes.SUCCESS

    document_ref = DocumentReference(args.document_id)

    if args.action == "get":
        if vault is not None and not args.include_archive:
            service.get_document(document_ref, vault, args.out_file, file_mode=args.file_mode)
        else:
            service.search_for_document(
                document_ref,
                args.out_file,
                vault,
                include_archive=args.include_archive,
                file_mode=args.file_mode,
            )
        console.print(f"[bold green]Saved[/bold green] {args.out_file}")
        return exit_codes.SUCCESS

    handlers: dict[str, Callable[[], None]] = {
        "replace": lambda: service.replace_document(
            document_ref,
            vault,
            args.file_path,
            file_name=args.file_name,
            title=args.title,
            tags=args.tags,
        ),
        "archive": lambda: service.archive_document(document_ref, vault),
        "delete": lambda: service.delete_document(document_ref, vault),
    }
    handlers[args.action]()
    console.print(f"[bold green]Done:[/bold green] {args.action} {args.document_id}")
    return exit_codes.SUCCESS


def _handle_templates(args: argparse.Namespace, settings: OpSettings) -> int:
    """Dispatch ``op-wrap templates <action>``."""
    from op_wrap.cli.render import render_template, render_template_list
    from op_wrap.core.models import Category
    from op_wrap.core.template_service import TemplateService

    service = TemplateService(_build_executor(settings))

    if args.action == "list":
        render_template_list(service.get_templates())
        return exit_codes.SUCCESS

    if args.category is not None:
        render_template(service.get_template(Category.parse(args.category)))
    else:
        render_template(service.get_template(args.name))
    return exit_codes.SUCCESS


def _handle_doctor(settings: OpSettings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from op_wrap.cli.doctor import run_doctor

    return run_doctor(settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the op-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.group is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = get_settings()
    configure_logging(settings.log_level)

    if args.group == "doctor":
        return _handle_doctor(settings)
    if args.group == "documents":
        return _handle_documents(args, settings)
    return _handle_templates(args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OpWrapError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
