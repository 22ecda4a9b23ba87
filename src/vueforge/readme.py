"""
vueforge.readme - README Generation
===================================

Renders the generated project's README.md from ``templates/README.md.j2``.
Sections for type checking, unit tests and linting only appear when the
matching feature is enabled, and every command is spelled for the
detected package manager.
"""

from __future__ import annotations

from jinja2 import Environment, PackageLoader

from vueforge.commands import get_command


README_SCRIPTS = ("install", "dev", "build", "test:unit", "lint")


def create_jinja_env() -> Environment:
    """Jinja2 environment over the packaged ``vueforge.templates``."""
    return Environment(
        loader=PackageLoader("vueforge", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def generate_readme(
    *,
    project_name: str,
    package_manager: str,
    needs_typescript: bool = False,
    needs_vitest: bool = False,
    needs_eslint: bool = False,
) -> str:
    """
    Render README.md for a generated project.

    Returns
    -------
    str
        The README content.
    """
    commands = {script: get_command(package_manager, script) for script in README_SCRIPTS}
    template = create_jinja_env().get_template("README.md.j2")
    return template.render(
        project_name=project_name,
        commands=commands,
        needs_typescript=needs_typescript,
        needs_vitest=needs_vitest,
        needs_eslint=needs_eslint,
    )
