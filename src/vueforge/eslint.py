"""
vueforge.eslint - ESLint Configuration Generation
=================================================

ESLint is the one feature whose config is generated in code rather than
shipped as a fragment: the ``extends`` chain depends on the style guide,
the language, and whether Prettier is present.

Recipes
-------
A recipe is keyed by ``<style_guide>-<language>``:

    default-javascript   eslint:recommended
    default-typescript   eslint:recommended + @vue/eslint-config-typescript

Any other combination has no recipe and is rejected with ``ValueError``
before anything is written, rather than producing a half-configured
project.

Generated Files
---------------
- ``.eslintrc.cjs``: always
- ``.editorconfig``: for style guides that ship one (airbnb, standard)
- ``.prettierrc.json``: when Prettier is enabled
"""

from __future__ import annotations

import json
import textwrap
from typing import TYPE_CHECKING, Any

from vueforge.merge import deep_merge, sort_manifest_dependencies
from vueforge.renderer import read_json, write_json


if TYPE_CHECKING:
    from pathlib import Path


VERSION_MAP: dict[str, str] = {
    "@rushstack/eslint-patch": "^1.3.2",
    "@vue/eslint-config-airbnb": "^7.0.0",
    "@vue/eslint-config-airbnb-with-typescript": "^7.0.0",
    "@vue/eslint-config-prettier": "^8.0.0",
    "@vue/eslint-config-standard": "^8.0.1",
    "@vue/eslint-config-standard-with-typescript": "^8.0.0",
    "@vue/eslint-config-typescript": "^11.0.3",
    "eslint": "^8.46.0",
    "eslint-plugin-vue": "^9.16.1",
    "prettier": "^3.0.0",
    "standard": "^17.1.0",
    "typescript": "~5.1.6",
}

EDITORCONFIGS: dict[str, str] = {
    "airbnb": textwrap.dedent("""\
        root = true

        [*.{js,jsx,mjs,cjs,ts,tsx,mts,cts,vue}]
        charset = utf-8
        end_of_line = lf
        indent_size = 2
        indent_style = space
        insert_final_newline = true
        max_line_length = 100
        trim_trailing_whitespace = true
        """),
    "standard": textwrap.dedent("""\
        root = true

        [*.{js,jsx,mjs,cjs,ts,tsx,mts,cts,vue}]
        charset = utf-8
        indent_size = 2
        indent_style = space
        insert_final_newline = true
        trim_trailing_whitespace = true
        """),
}

PRETTIERRCS: dict[str, dict[str, Any]] = {
    "default": {
        "$schema": "https://json.schemastore.org/prettierrc",
        "semi": True,
        "tabWidth": 2,
        "singleQuote": True,
        "printWidth": 100,
        "trailingComma": "all",
    },
    "airbnb": {
        "$schema": "https://json.schemastore.org/prettierrc",
        "arrowParens": "always",
        "bracketSameLine": False,
        "bracketSpacing": True,
        "endOfLine": "lf",
        "jsxSingleQuote": False,
        "printWidth": 100,
        "proseWrap": "preserve",
        "quoteProps": "as-needed",
        "semi": True,
        "singleQuote": True,
        "tabWidth": 2,
        "trailingComma": "all",
        "useTabs": False,
    },
    "standard": {
        "$schema": "https://json.schemastore.org/prettierrc",
        "arrowParens": "always",
        "bracketSameLine": False,
        "bracketSpacing": True,
        "jsxSingleQuote": True,
        "proseWrap": "preserve",
        "quoteProps": "as-needed",
        "semi": False,
        "singleQuote": True,
        "tabWidth": 2,
        "trailingComma": "none",
        "useTabs": False,
    },
}

LINT_SCRIPT = (
    "eslint . --ext .vue,.js,.jsx,.cjs,.mjs,.ts,.tsx,.cts,.mts --fix --ignore-path .gitignore"
)

ESLINT_EXTENSION = "dbaeumer.vscode-eslint"


def create_eslint_config(
    *,
    style_guide: str = "default",
    has_typescript: bool = False,
    needs_prettier: bool = False,
    additional_config: dict[str, Any] | None = None,
    additional_dependencies: dict[str, str] | None = None,
) -> tuple[dict[str, Any], dict[str, str]]:
    """
    Build the ESLint config files and the package.json patch.

    Parameters
    ----------
    style_guide : str
        ``default``, ``airbnb`` or ``standard``.

    has_typescript : bool
        Selects the TypeScript flavour of the recipe.

    needs_prettier : bool
        Add the Prettier integration and ``.prettierrc.json``.

    additional_config, additional_dependencies : dict | None
        Deep-merged into the ESLint config and devDependencies.

    Returns
    -------
    tuple[dict, dict[str, str]]
        ``(pkg, files)``: the manifest fragment to merge into package.json,
        and a mapping of file name to file content.

    Raises
    ------
    ValueError
        If there is no recipe for the style guide and language.
    """
    pkg: dict[str, Any] = {"devDependencies": {}}

    def add_dependency(name: str) -> None:
        pkg["devDependencies"][name] = VERSION_MAP[name]

    add_dependency("eslint")
    add_dependency("eslint-plugin-vue")

    language = "typescript" if has_typescript else "javascript"

    eslint_config: dict[str, Any] = {
        "parserOptions": {"ecmaVersion": "latest"},
        "root": True,
        "extends": ["plugin:vue/vue3-essential"],
    }

    combination = f"{style_guide}-{language}"
    if combination == "default-javascript":
        eslint_config["extends"].append("eslint:recommended")
    elif combination == "default-typescript":
        eslint_config["extends"].append("eslint:recommended")
        add_dependency("@vue/eslint-config-typescript")
        eslint_config["extends"].append("@vue/eslint-config-typescript")
    else:
        msg = f"unexpected combination of style guide and language: {combination}"
        raise ValueError(msg)

    deep_merge(pkg["devDependencies"], additional_dependencies or {})
    deep_merge(eslint_config, additional_config or {})

    if needs_prettier:
        add_dependency("prettier")
        add_dependency("@vue/eslint-config-prettier")
        eslint_config["extends"].append("@vue/eslint-config-prettier/skip-formatting")

    eslintrc = ""
    if style_guide == "default":
        # airbnb and standard already set `env: node`
        eslintrc += "/* eslint-env node */\n"
    if "@rushstack/eslint-patch" in pkg["devDependencies"]:
        eslintrc += "require('@rushstack/eslint-patch/modern-module-resolution')\n\n"
    eslintrc += f"module.exports = {json.dumps(eslint_config, indent=2)}\n"

    files = {".eslintrc.cjs": eslintrc}
    if style_guide in EDITORCONFIGS:
        files[".editorconfig"] = EDITORCONFIGS[style_guide]
    if needs_prettier:
        files[".prettierrc.json"] = json.dumps(PRETTIERRCS[style_guide], indent=2)

    return pkg, files


def render_eslint(
    root: Path,
    *,
    needs_typescript: bool,
    needs_prettier: bool,
    style_guide: str = "default",
) -> list[Path]:
    """
    Write the ESLint setup into the project at ``root``.

    Merges the devDependencies and a ``lint`` script into package.json,
    writes the generated config files, and recommends the ESLint editor
    extension.

    Returns
    -------
    list[Path]
        Files written or updated.

    Raises
    ------
    ValueError
        If there is no recipe for the style guide and language. Nothing is
        written in that case.
    """
    pkg, files = create_eslint_config(
        style_guide=style_guide,
        has_typescript=needs_typescript,
        needs_prettier=needs_prettier,
    )
    written: list[Path] = []

    package_json = root / "package.json"
    existing = read_json(package_json)
    deep_merge(existing, {"scripts": {"lint": LINT_SCRIPT}})
    write_json(package_json, sort_manifest_dependencies(deep_merge(existing, pkg)))
    written.append(package_json)

    for name, content in files.items():
        path = root / name
        path.write_text(content, encoding="utf-8")
        written.append(path)

    extensions_json = root / ".vscode" / "extensions.json"
    extensions_json.parent.mkdir(parents=True, exist_ok=True)
    extensions: dict[str, Any] = read_json(extensions_json) if extensions_json.exists() else {}
    write_json(extensions_json, deep_merge(extensions, {"recommendations": [ESLINT_EXTENSION]}))
    written.append(extensions_json)

    return written
