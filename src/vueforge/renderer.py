"""
vueforge.renderer - Fragment Overlay and Data/Template Pass
===========================================================

This module overlays fragment directories onto the output tree and runs the
deferred data/template pass once every fragment has been rendered.

Overlay Rules
-------------
``render_template`` copies a fragment recursively. Files are handled by the
first rule that matches:

1. ``node_modules`` / ``__pycache__``    skipped
2. ``package.json`` that exists          merged, dependencies sorted
3. ``extensions.json`` that exists       merged
4. ``_name``                             renamed to ``.name``
5. ``.gitignore`` that exists            appended to
6. ``name.data.py``                      registered as a data provider
7. anything else                         copied, overwriting

Data Providers and Templates
----------------------------
A file ``src/main.js.data.py`` is never copied. It must define
``get_data(*, old_data)`` returning (or awaiting to) the data for
``src/main.js``. Providers for the same destination are chained in render
order: each receives what the previous one returned.

After all fragments are rendered, ``collect_template_data`` runs the
providers one by one, then ``render_data_templates`` renders every
``*.j2`` file in the tree with the data collected for its stripped path.

Usage Example
-------------
>>> callbacks = []
>>> render_template(fragments / "base", root, callbacks)
>>> render_template(fragments / "entry/router", root, callbacks)
>>> data_store = collect_template_data(callbacks)
>>> render_data_templates(root, data_store)
"""

from __future__ import annotations

import asyncio
import inspect
import json
import runpy
import shutil
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jinja2 import Environment

from vueforge.merge import deep_merge, sort_manifest_dependencies
from vueforge.traverse import pre_order_directory_traverse


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from pathlib import Path

    DataStore = dict[Path, Any]
    DataCallback = Callable[[DataStore], Awaitable[None]]


# =============================================================================
# File Name Conventions
# =============================================================================

SKIPPED_ENTRIES = frozenset({"node_modules", "__pycache__"})

DATA_FILE_SUFFIX = ".data.py"
TEMPLATE_SUFFIX = ".j2"


# =============================================================================
# JSON Helpers
# =============================================================================


def read_json(path: Path) -> Any:
    """Parse a JSON file. Malformed content raises ``json.JSONDecodeError``."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path: Path, data: Any) -> None:
    """Write ``data`` pretty-printed with a trailing newline."""
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


# =============================================================================
# Fragment Overlay
# =============================================================================


def render_template(src: Path, dest: Path, callbacks: list[DataCallback]) -> None:
    """
    Overlay the file or directory ``src`` onto ``dest``.

    Parameters
    ----------
    src : Path
        Fragment file or directory to copy.

    dest : Path
        Destination path. Existing directories are reused, never cleared.

    callbacks : list
        Data-provider callbacks are appended here, in encounter order, for
        :func:`collect_template_data` to run later.

    Raises
    ------
    FileNotFoundError
        If ``src`` does not exist.
    json.JSONDecodeError
        If a manifest being merged is not valid JSON.
    """
    if src.name in SKIPPED_ENTRIES:
        return

    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for child in sorted(src.iterdir()):
            render_template(child, dest / child.name, callbacks)
        return

    filename = src.name

    if filename == "package.json" and dest.exists():
        # merge instead of overwriting
        pkg = deep_merge(read_json(dest), read_json(src))
        write_json(dest, sort_manifest_dependencies(pkg))
        return

    if filename == "extensions.json" and dest.exists():
        write_json(dest, deep_merge(read_json(dest), read_json(src)))
        return

    if filename.startswith("_"):
        dest = dest.with_name("." + filename[1:])

    if dest.name == ".gitignore" and dest.exists():
        existing = dest.read_text(encoding="utf-8")
        addition = src.read_text(encoding="utf-8")
        dest.write_text(existing + "\n" + addition, encoding="utf-8")
        return

    if filename.endswith(DATA_FILE_SUFFIX):
        target = dest.with_name(dest.name[: -len(DATA_FILE_SUFFIX)])
        callbacks.append(make_data_callback(src, target))
        return

    shutil.copyfile(src, dest)


def make_data_callback(provider: Path, target: Path) -> DataCallback:
    """
    Build the deferred task for one data-provider file.

    The task loads ``provider``, calls its ``get_data`` with the data already
    stored for ``target`` (or ``{}``), and stores the result under ``target``.
    """

    async def callback(data_store: DataStore) -> None:
        get_data = load_data_provider(provider)
        data = get_data(old_data=data_store.get(target, {}))
        if inspect.isawaitable(data):
            data = await data
        data_store[target] = data

    return callback


def load_data_provider(path: Path) -> Callable[..., Any]:
    """
    Load the ``get_data`` function from a provider file.

    ``runpy`` compiles the source directly, so no ``__pycache__`` is written
    into the fragment library.

    Raises
    ------
    AttributeError
        If the file does not define ``get_data``.
    """
    namespace = runpy.run_path(str(path))
    try:
        return namespace["get_data"]
    except KeyError:
        msg = f"Data provider {path} does not define get_data()"
        raise AttributeError(msg) from None


# =============================================================================
# Data/Template Pass
# =============================================================================


async def run_data_callbacks(callbacks: list[DataCallback], data_store: DataStore) -> DataStore:
    """Await every callback strictly in order; later ones see earlier results."""
    for callback in callbacks:
        await callback(data_store)
    return data_store


def collect_template_data(callbacks: list[DataCallback]) -> DataStore:
    """
    Phase 1: run all registered data providers and return the data store.

    Returns
    -------
    dict[Path, Any]
        Mapping of destination path to the last provider's result.
    """
    data_store: DataStore = {}
    if not callbacks:
        return data_store
    return asyncio.run(run_data_callbacks(callbacks, data_store))


def create_template_env() -> Environment:
    """
    Jinja2 environment for ``*.j2`` files inside fragments.

    Autoescaping is disabled since the output is source code, not HTML
    pages rendered from user input.
    """
    return Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_data_templates(root: Path, data_store: DataStore) -> list[Path]:
    """
    Phase 2: render every ``*.j2`` file under ``root`` in place.

    Each template is rendered with the data stored for its path without the
    suffix, written there, and then deleted.

    Returns
    -------
    list[Path]
        Paths of the files that were produced.

    Raises
    ------
    TypeError
        If the data stored for a template is not a mapping.
    """
    env = create_template_env()
    rendered: list[Path] = []

    def render_file(filepath: Path) -> None:
        if not filepath.name.endswith(TEMPLATE_SUFFIX):
            return
        dest = filepath.with_name(filepath.name[: -len(TEMPLATE_SUFFIX)])
        data = data_store.get(dest, {})
        if not isinstance(data, Mapping):
            msg = (
                f"data provider for {dest} returned {type(data).__name__}, "
                "expected a mapping of template variables"
            )
            raise TypeError(msg)
        template = env.from_string(filepath.read_text(encoding="utf-8"))
        dest.write_text(template.render(**data), encoding="utf-8")
        filepath.unlink()
        rendered.append(dest)

    pre_order_directory_traverse(root, lambda _: None, render_file)
    return rendered
