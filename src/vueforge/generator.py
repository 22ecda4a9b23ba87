"""
vueforge.generator - Project Generation Pipeline
================================================

This module sequences the fragment library into a finished project.

Architecture
------------
The generator follows a pipeline pattern:

    1. Reset the project directory (empty it, or create it)
    2. Write the initial package.json
    3. Overlay fragments in a fixed order
    4. Run the data providers, then render ``*.j2`` templates
    5. Convert the tree to TypeScript, or strip TypeScript from it
    6. Write README.md and print the next steps

Fragment Order
--------------
Order matters: later fragments merge into package.json, extensions.json and
.gitignore written by earlier ones, and data providers for the same file
are chained in render order.

    base
    config/router                       (router)
    config/pinia                        (pinia)
    entry/vitest, config/vitest         (vitest)
    config/prettier                     (prettier)
    config/typescript, tsconfig/base    (typescript)
    tsconfig/vitest                     (typescript + vitest)
    ESLint config, generated            (eslint)
    code/[typescript-](router|default)
    entry/(router-and-pinia|pinia|router|default)
    config/element-plus                 (element_plus)

Nothing is rolled back on failure: the first error propagates and leaves
the directory partially rendered. Generating again empties it first.

Usage Example
-------------
>>> from vueforge.generator import create_project
>>> from vueforge.models import ProjectConfig
>>> result = create_project(ProjectConfig(name="my-app", router=True))
>>> result.fragments[:2]
['base', 'config/router']
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from vueforge.commands import detect_package_manager, get_command
from vueforge.eslint import render_eslint
from vueforge.models import ProjectConfig
from vueforge.readme import generate_readme
from vueforge.renderer import collect_template_data, render_data_templates, render_template
from vueforge.traverse import empty_dir
from vueforge.typescript import convert_to_typescript, strip_typescript


# =============================================================================
# Module-Level Configuration
# =============================================================================

# Console for rich output
console = Console()

# Fragment library shipped with the package
FRAGMENTS_ROOT = Path(__file__).parent / "fragments"


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class GenerationResult:
    """
    Result of a project generation run.

    Attributes
    ----------
    success : bool
        Whether every step completed.

    project_path : Path
        Absolute path to the generated project.

    package_manager : str
        Package manager the follow-up commands were written for.

    fragments : list[str]
        Fragment keys rendered, in order. ESLint appears as ``eslint``.

    warnings : list[str]
        Non-fatal notes collected during generation.
    """

    success: bool
    project_path: Path
    package_manager: str = "npm"
    fragments: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# =============================================================================
# Fragment Sequencing
# =============================================================================


def plan_fragments(config: ProjectConfig) -> list[str]:
    """
    List the fragment keys to render for ``config``, in render order.

    The ESLint step is not a fragment directory; it appears as the
    pseudo-key ``eslint`` at the position it runs.

    Examples
    --------
    >>> plan_fragments(ProjectConfig(name="demo"))
    ['base', 'code/default', 'entry/default']
    """
    plan = ["base"]

    if config.router:
        plan.append("config/router")
    if config.pinia:
        plan.append("config/pinia")
    if config.vitest:
        plan.extend(["entry/vitest", "config/vitest"])
    if config.prettier:
        plan.append("config/prettier")

    if config.typescript:
        plan.extend(["config/typescript", "tsconfig/base"])
        if config.vitest:
            plan.append("tsconfig/vitest")

    if config.eslint:
        plan.append("eslint")

    plan.append(f"code/{config.code_template}")
    plan.append(f"entry/{config.entry_template}")

    if config.element_plus:
        plan.append("config/element-plus")

    return plan


def reset_project_dir(root: Path) -> None:
    """Empty ``root`` if it exists, otherwise create it."""
    if root.exists():
        empty_dir(root)
    else:
        root.mkdir(parents=True)


def write_initial_package_json(config: ProjectConfig, root: Path) -> None:
    pkg = {"name": config.name, "version": "0.0.0"}
    (root / "package.json").write_text(json.dumps(pkg, indent=2), encoding="utf-8")


# =============================================================================
# Main Generation Function
# =============================================================================


def create_project(
    config: ProjectConfig,
    *,
    verbose: bool = True,
    fragments_root: Path | None = None,
) -> GenerationResult:
    """
    Generate a Vue project from the given configuration.

    Parameters
    ----------
    config : ProjectConfig
        Resolved feature flags.

    verbose : bool, default=True
        If True, display progress and next steps on the console.

    fragments_root : Path | None
        Fragment library to compose from. Defaults to the packaged one.

    Returns
    -------
    GenerationResult
        Result object with the rendered fragment list.

    Raises
    ------
    ValueError
        If the ESLint style guide has no recipe for the chosen language.
    OSError
        On any file system failure, e.g. a missing fragment.
    json.JSONDecodeError
        If a manifest being merged is not valid JSON.
    """
    templates = fragments_root or FRAGMENTS_ROOT
    root = config.project_dir.resolve()
    cwd = Path.cwd()
    package_manager = detect_package_manager()

    result = GenerationResult(
        success=False,
        project_path=root,
        package_manager=package_manager,
    )

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Scaffolding project:[/] [green]{config.name}[/]\n"
                f"[dim]Features: {', '.join(config.enabled_features) or 'none'}[/]",
                title="[bold]vueforge[/]",
                border_style="blue",
            )
        )
        console.print()

    reset_project_dir(root)
    write_initial_package_json(config, root)

    # Step 1: Overlay fragments
    if verbose:
        console.print(f"[bold]📁 Scaffolding project in {root}...[/]")

    callbacks: list = []
    for key in plan_fragments(config):
        if key == "eslint":
            render_eslint(
                root,
                needs_typescript=config.typescript,
                needs_prettier=config.prettier,
                style_guide=config.eslint_style_guide,
            )
        else:
            render_template(templates / key, root, callbacks)
        result.fragments.append(key)

        if verbose:
            console.print(f"  Rendered {key}")

    # Step 2: Data providers, then templates
    if verbose:
        console.print()
        console.print("[bold]📝 Rendering templates...[/]")

    data_store = collect_template_data(callbacks)
    for path in render_data_templates(root, data_store):
        if verbose:
            console.print(f"  Created {path.relative_to(root)}")

    # Step 3: TypeScript cleanup
    if config.typescript:
        convert_to_typescript(root)
    else:
        strip_typescript(root)

    # Step 4: README
    (root / "README.md").write_text(
        generate_readme(
            project_name=config.name,
            package_manager=package_manager,
            needs_typescript=config.typescript,
            needs_vitest=config.vitest,
            needs_eslint=config.eslint,
        ),
        encoding="utf-8",
    )

    result.success = True

    if verbose:
        steps = []
        if root != cwd:
            relative = _relative_to(root, cwd)
            steps.append(f'cd "{relative}"' if " " in relative else f"cd {relative}")
        steps.append(get_command(package_manager, "install"))
        if config.prettier:
            steps.append(get_command(package_manager, "format"))
        steps.append(get_command(package_manager, "dev"))

        console.print()
        console.print(
            Panel(
                "[bold green]✨ Done.[/] Now run:\n\n"
                + "\n".join(f"  [bold green]{step}[/]" for step in steps),
                title="[bold green]Success[/]",
                border_style="green",
            )
        )

    return result


def _relative_to(path: Path, start: Path) -> str:
    try:
        return str(path.relative_to(start))
    except ValueError:
        return str(path)
