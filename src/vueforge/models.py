"""
vueforge.models - Pydantic Models for Project Configuration
===========================================================

This module defines the resolved feature-flag record that drives project
generation. Pydantic gives us:

1. **Validation**: The project name is checked against npm's package name rules
2. **Immutability**: The config is frozen once resolved, so the orchestrator
   can rely on flags never changing mid-run
3. **Documentation**: Fields are self-documenting with descriptions

Fragment Selection
------------------
Two fragments are chosen from flag combinations rather than single flags:

    code/<variant>      [typescript-](router|default)
    entry/<variant>     router-and-pinia | pinia | router | default

Usage Example
-------------
>>> from vueforge.models import ProjectConfig
>>> config = ProjectConfig(name="my-app", typescript=True, router=True)
>>> config.code_template
'typescript-router'
>>> config.entry_template
'router'
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


# npm package name rules (scoped names allowed)
PACKAGE_NAME_PATTERN = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)

# Style guides offered by the CLI. Only some have an ESLint recipe for
# every language; see vueforge.eslint.
STYLE_GUIDES = ("default", "airbnb", "standard")


def is_valid_package_name(name: str) -> bool:
    """Return True if ``name`` can be used as a package.json name."""
    return PACKAGE_NAME_PATTERN.match(name) is not None


class ProjectConfig(BaseModel):
    """
    Resolved feature flags for a vueforge project.

    Attributes
    ----------
    name : str
        Project name, used for the output directory and package.json.

    typescript, router, pinia, vitest, eslint, prettier, element_plus : bool
        Feature flags. Each one adds one or more fragments to the output.

    eslint_style_guide : str
        Style guide used for the generated ESLint config.

    output_dir : Path
        Directory the project directory is created in.

    Examples
    --------
    >>> config = ProjectConfig(name="demo", pinia=True, router=True)
    >>> config.entry_template
    'router-and-pinia'
    >>> config.project_dir.name
    'demo'
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(
        description="Project name (used for the directory and package.json)",
        min_length=1,
        max_length=214,
    )]

    typescript: bool = Field(default=False, description="Use TypeScript")
    router: bool = Field(default=False, description="Add Vue Router")
    pinia: bool = Field(default=False, description="Add Pinia for state management")
    vitest: bool = Field(default=False, description="Add Vitest for unit testing")
    eslint: bool = Field(default=False, description="Add ESLint for code quality")
    prettier: bool = Field(default=False, description="Add Prettier for code formatting")
    element_plus: bool = Field(default=False, description="Add the Element Plus UI library")

    eslint_style_guide: str = Field(
        default="default",
        description="ESLint style guide (default, airbnb, standard)",
    )
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where the project will be created",
    )

    @field_validator("name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """
        Validate the project name against npm's package naming rules.

        Raises
        ------
        ValueError
            If the name cannot be used in package.json.
        """
        v = v.strip()
        if not is_valid_package_name(v):
            msg = f"Invalid package.json name: '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("eslint_style_guide")
    @classmethod
    def normalize_style_guide(cls, v: str) -> str:
        return v.lower().strip()

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """Full path to the project directory (output_dir / name)."""
        return self.output_dir / self.name

    @property
    def code_template(self) -> str:
        """
        Name of the ``code/`` fragment for this flag combination.

        Returns
        -------
        str
            One of ``default``, ``router``, ``typescript-default``,
            ``typescript-router``.
        """
        return ("typescript-" if self.typescript else "") + (
            "router" if self.router else "default"
        )

    @property
    def entry_template(self) -> str:
        """
        Name of the ``entry/`` fragment for this flag combination.

        The four cases are mutually exclusive; router and Pinia together
        select a dedicated entry rather than either one alone.
        """
        if self.pinia and self.router:
            return "router-and-pinia"
        if self.pinia:
            return "pinia"
        if self.router:
            return "router"
        return "default"

    @property
    def enabled_features(self) -> list[str]:
        """Names of the feature flags set to True."""
        flags = ("typescript", "router", "pinia", "vitest", "eslint", "prettier", "element_plus")
        return [flag for flag in flags if getattr(self, flag)]
