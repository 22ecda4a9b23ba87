"""
vueforge.traverse - Directory Walks
===================================

Generic pre-order and post-order walks over a file tree. The walks perform
no mutation themselves; every side effect belongs to the visitor callbacks.

- Pre-order fires the directory visitor before descending. The data/template
  pass and the TypeScript pass use it.
- Post-order fires the directory visitor after all children. Deletion needs
  this, since a directory can only be removed once it is empty.

Children are visited in sorted order. Entries are classified with ``lstat``,
so a symlink to a directory is handed to the file visitor.
"""

from __future__ import annotations

import stat
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    Visitor = Callable[[Path], object]


def _is_directory(path: Path) -> bool:
    return stat.S_ISDIR(path.lstat().st_mode)


def pre_order_directory_traverse(
    directory: Path,
    dir_callback: Visitor,
    file_callback: Visitor,
) -> None:
    """
    Walk ``directory`` calling ``dir_callback`` before descending.

    Parameters
    ----------
    directory : Path
        Root of the walk. The root itself is not passed to any visitor.

    dir_callback : Callable[[Path], object]
        Called for every sub-directory before its children.

    file_callback : Callable[[Path], object]
        Called for every non-directory entry.
    """
    for entry in sorted(directory.iterdir()):
        if _is_directory(entry):
            dir_callback(entry)
            # the visitor may have removed the directory
            if entry.exists():
                pre_order_directory_traverse(entry, dir_callback, file_callback)
            continue
        file_callback(entry)


def post_order_directory_traverse(
    directory: Path,
    dir_callback: Visitor,
    file_callback: Visitor,
) -> None:
    """
    Walk ``directory`` calling ``dir_callback`` after all children.

    Parameters are the same as :func:`pre_order_directory_traverse`.
    """
    for entry in sorted(directory.iterdir()):
        if _is_directory(entry):
            post_order_directory_traverse(entry, dir_callback, file_callback)
            dir_callback(entry)
            continue
        file_callback(entry)


def empty_dir(directory: Path) -> None:
    """
    Delete everything inside ``directory``, keeping the directory itself.

    Does nothing if the directory does not exist.
    """
    if not directory.exists():
        return

    post_order_directory_traverse(
        directory,
        lambda d: d.rmdir(),
        lambda f: f.unlink(),
    )
