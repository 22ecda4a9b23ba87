"""
vueforge.typescript - TypeScript Conversion Pass
================================================

Fragments share as many files as possible between JavaScript and
TypeScript projects. Where a file cannot be shared, the fragment ships a
``.ts`` version next to the ``.js`` one. Once the tree is fully rendered,
one of the two passes below removes the redundancy:

- ``convert_to_typescript``: every remaining ``.js`` file becomes ``.ts``,
  unless a ``.ts`` sibling already exists (then the ``.js`` is deleted).
  ``jsconfig.json`` goes away in favour of the tsconfig fragments, and
  ``index.html`` is pointed at ``src/main.ts``.
- ``strip_typescript``: every ``.ts`` file is deleted.

Both passes are idempotent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vueforge.traverse import pre_order_directory_traverse


if TYPE_CHECKING:
    from pathlib import Path


# Files that stay JavaScript even in TypeScript projects
FILES_TO_FILTER = ("nightwatch.conf.js", "globals.js")

JS_ENTRY = "src/main.js"
TS_ENTRY = "src/main.ts"


def convert_to_typescript(root: Path) -> None:
    """
    Promote the rendered tree at ``root`` to TypeScript.

    Raises
    ------
    FileNotFoundError
        If ``root/index.html`` does not exist.
    """

    def convert_file(filepath: Path) -> None:
        if filepath.suffix == ".js" and filepath.name not in FILES_TO_FILTER:
            ts_path = filepath.with_suffix(".ts")
            if ts_path.exists():
                filepath.unlink()
            else:
                filepath.rename(ts_path)
        elif filepath.name == "jsconfig.json":
            filepath.unlink()

    pre_order_directory_traverse(root, lambda _: None, convert_file)

    index_html = root / "index.html"
    content = index_html.read_text(encoding="utf-8")
    index_html.write_text(content.replace(JS_ENTRY, TS_ENTRY), encoding="utf-8")


def strip_typescript(root: Path) -> None:
    """Delete every ``.ts`` file left over from shared fragments."""

    def remove_ts(filepath: Path) -> None:
        if filepath.suffix == ".ts":
            filepath.unlink()

    pre_order_directory_traverse(root, lambda _: None, remove_ts)
