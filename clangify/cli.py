# clangify/cli.py
"""
clangify command-line interface.

Wires clang-format / clang-tidy targets into an existing CMake project:

1. Scan ``CMakeLists.txt`` for the project name and targets, and the project
   tree for source/header folders (confirmed interactively).
2. Print the generated ClangTools snippet.
3. Copy ``.clang-format``, ``.clang-tidy`` and ``cmake/`` from a tools
   directory next to ``CMakeLists.txt``.
4. Append the snippet to ``CMakeLists.txt``.

The append is the last step, so any earlier failure leaves the build
description untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from clangify import __version__
from clangify.banner import print_banner, show_snippet
from clangify.config import load_settings
from clangify.copier import copy_config_files
from clangify.dialog import ask_tools_dir, filter_options
from clangify.errors import ClangifyError
from clangify.generator import accept_all, append_snippet, generate_snippet
from clangify.log_manager import get_logger

__all__ = ["cli", "main"]

console = Console()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--path",
    "list_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to a CMakeLists.txt file.",
)
@click.option(
    "--tools-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding .clang-format, .clang-tidy and cmake/ (skips the prompt).",
)
@click.option(
    "--headless",
    is_flag=True,
    help="No prompts: keep every discovered folder and use the default tools directory.",
)
@click.option("--dry-run", is_flag=True, help="Print the snippet only; copy and append nothing.")
@click.option("--no-banner", is_flag=True, help="Do not print the start-up banner.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs to this file.",
)
@click.version_option(__version__, prog_name="clangify")
@click.pass_context
def cli(
    ctx: click.Context,
    list_file: Optional[Path],
    tools_dir: Optional[Path],
    headless: bool,
    dry_run: bool,
    no_banner: bool,
    verbose: bool,
    log_file: Optional[Path],
) -> None:
    """🛠️  Add clang-format and clang-tidy targets to a CMake project."""
    if list_file is None:
        # Nothing to do: show usage and leave without touching anything.
        click.echo(ctx.get_help())
        ctx.exit(0)

    settings = load_settings()
    try:
        logger = get_logger(
            "clangify",
            level=logging.DEBUG if verbose else settings.log_level,
            log_to_file=str(log_file) if log_file else None,
            force_color=settings.force_color,
        )
    except OSError as exc:
        raise ClangifyError(f"Failed to open log file '{log_file}': {exc}") from exc

    headless = headless or settings.headless
    if not no_banner:
        print_banner(console)

    snippet = generate_snippet(list_file, select=accept_all if headless else filter_options)
    show_snippet(console, snippet)

    if dry_run:
        click.secho("ℹ️  Dry run: nothing copied, CMakeLists.txt unchanged.", fg="yellow")
        return

    if tools_dir is None:
        tools_dir = settings.tools_dir if headless else ask_tools_dir(settings.tools_dir)
    logger.info("Using tools directory %s", tools_dir)

    copy_config_files(tools_dir, list_file)
    append_snippet(list_file, snippet)

    click.secho(f"🎉 ClangTools configuration added to {list_file}", fg="green", bold=True)
    click.secho("👉 Next: re-run CMake, then build the <project>-format and <project>-tidy targets.", fg="blue")


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
