"""
vueforge.cli - Command Line Interface
=====================================

This module provides the command-line interface for vueforge using Typer,
with questionary for the interactive feature prompts.

Architecture
------------
    app (main entry point)
    └── create (alias: c) - Scaffold a new project

Passing any feature flag (or ``--default``) switches off the feature
prompts entirely: flags that were not given are treated as "no". Without
flags, every feature is asked for interactively.

Usage Examples
--------------
Interactive mode:
    $ vueforge create my-app

Non-interactive mode:
    $ vueforge create my-app --ts --router --pinia --vitest --eslint

Show help:
    $ vueforge --help
    $ vueforge create --help
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import questionary
import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from vueforge import __version__
from vueforge.generator import create_project
from vueforge.models import STYLE_GUIDES, ProjectConfig, is_valid_package_name


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="vueforge",
    help="Scaffold a Vue 3 + Vite project from composable fragments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

console = Console()

# Feature prompts, in the order they are asked
FEATURE_PROMPTS: dict[str, str] = {
    "router": "Add Router?",
    "pinia": "Add Pinia?",
    "vitest": "Add Vitest?",
    "eslint": "Add ESLint?",
    "element_plus": "Add Element-Plus?",
    "typescript": "Add TypeScript?",
    "prettier": "Add Prettier?",
}


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]vueforge[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Vue 3 + Vite project scaffolder[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def prompt_project_name(default: str | None = None) -> str:
    """
    Ask for the project name, validated as a package.json name.

    Returns
    -------
    str
        The entered project name.
    """
    result = questionary.text(
        "Project name:",
        default=default or "vue-project",
        validate=lambda val: True if is_valid_package_name(val) else "Invalid package.json name",
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_feature(message: str, default: bool | None = None) -> bool:
    """Ask a yes/no feature question."""
    result = questionary.confirm(message, default=bool(default)).ask()

    if result is None:
        raise typer.Abort()

    return result


def resolve_features(
    flags: dict[str, bool | None],
    *,
    use_defaults: bool = False,
) -> dict[str, bool]:
    """
    Turn the optional CLI flags into a complete feature set.

    Parameters
    ----------
    flags : dict[str, bool | None]
        Feature name to flag value; None when the flag was not passed.

    use_defaults : bool
        Skip prompting, as if a feature flag had been given.

    Returns
    -------
    dict[str, bool]
        Every feature name mapped to a definite answer.
    """
    skip_prompts = use_defaults or any(value is not None for value in flags.values())
    if skip_prompts:
        return {name: bool(value) for name, value in flags.items()}

    return {name: prompt_feature(FEATURE_PROMPTS[name]) for name in FEATURE_PROMPTS}


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]vueforge[/] - Vue 3 + Vite project scaffolder.

    [bold]Quick Start:[/]

        vueforge create my-app

    [bold]Non-interactive:[/]

        vueforge create my-app --ts --router --pinia
    """


# =============================================================================
# Create Command
# =============================================================================

def create(
    name: Annotated[
        str | None,
        typer.Argument(help="Name of the project to create"),
    ] = None,
    typescript: Annotated[
        bool | None,
        typer.Option("--typescript/--no-typescript", "--ts/--no-ts", help="Use TypeScript"),
    ] = None,
    router: Annotated[
        bool | None,
        typer.Option("--router/--no-router", help="Add Vue Router"),
    ] = None,
    pinia: Annotated[
        bool | None,
        typer.Option("--pinia/--no-pinia", help="Add Pinia for state management"),
    ] = None,
    vitest: Annotated[
        bool | None,
        typer.Option("--vitest/--no-vitest", help="Add Vitest for unit testing"),
    ] = None,
    eslint: Annotated[
        bool | None,
        typer.Option("--eslint/--no-eslint", help="Add ESLint for code quality"),
    ] = None,
    prettier: Annotated[
        bool | None,
        typer.Option("--prettier/--no-prettier", help="Add Prettier for code formatting"),
    ] = None,
    element_plus: Annotated[
        bool | None,
        typer.Option(
            "--element-plus/--no-element-plus",
            "--element/--no-element",
            help="Add the Element Plus UI library",
        ),
    ] = None,
    eslint_style: Annotated[
        str,
        typer.Option(
            "--eslint-style",
            help=f"ESLint style guide: {', '.join(STYLE_GUIDES)}",
        ),
    ] = "default",
    default: Annotated[
        bool,
        typer.Option(
            "--default",
            help="Skip feature prompts; features not passed as flags are off",
        ),
    ] = False,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to create project in (default: current directory)",
        ),
    ] = None,
) -> None:
    """
    Create a new Vue project.

    [bold]Examples:[/]

        # Interactive mode (prompts for every feature)
        vueforge create my-app

        # Everything off
        vueforge create my-app --default

        # TypeScript with Router and Pinia
        vueforge create my-app --ts --router --pinia
    """
    if name is None:
        name = prompt_project_name()

    features = resolve_features(
        {
            "router": router,
            "pinia": pinia,
            "vitest": vitest,
            "eslint": eslint,
            "element_plus": element_plus,
            "typescript": typescript,
            "prettier": prettier,
        },
        use_defaults=default,
    )

    try:
        config = ProjectConfig(
            name=name,
            eslint_style_guide=eslint_style,
            output_dir=output_dir or Path.cwd(),
            **features,
        )
    except ValidationError as e:
        rprint(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        create_project(config, verbose=True)
    except Exception as e:
        rprint(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)


app.command("create")(create)
app.command("c", hidden=True)(create)
