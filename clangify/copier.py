# clangify/copier.py
"""
Copy the clang configuration artifacts into a CMake project.

Public API
----------
- PathType: Kind of filesystem entry (file, directory, missing).
- path_type(path): Classify a path.
- copy_file(src, dst): Copy content, then permission bits.
- copy_dir(src, dst): Recursive, sequential directory copy.
- default_tools_dir(): Directory shipped with the package.
- copy_config_files(src_dir, list_file): Copy every CONFIG_FILE_NAMES entry
  next to ``list_file``.

Notes
-----
- All artifacts are checked before the first copy, so a missing one aborts
  the run without a half-configured project.
- Directory creation is idempotent. Copies run one at a time.
"""

from __future__ import annotations

import enum
import logging
import os
import shutil
from pathlib import Path
from typing import List, Sequence, Union

import click

from clangify.constants import CONFIG_FILE_NAMES
from clangify.errors import CopyError, MissingArtifactError, ToolsDirError

__all__ = [
    "PathType",
    "path_type",
    "copy_file",
    "copy_dir",
    "default_tools_dir",
    "copy_config_files",
]

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


class PathType(enum.Enum):
    FILE = "file"
    DIR = "dir"
    MISSING = "missing"


def path_type(path: PathArg) -> PathType:
    """Return whether ``path`` is a regular file, a directory or neither."""
    p = Path(path)
    if p.is_dir():
        return PathType.DIR
    if p.is_file():
        return PathType.FILE
    return PathType.MISSING


def copy_file(src: PathArg, dst: PathArg) -> None:
    """Copy one regular file and then apply the source permission bits to ``dst``.

    Raises
    ------
    OSError
        If reading, writing or chmod fails. ``shutil.SameFileError`` when
        ``src`` and ``dst`` are the same file.
    """
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def copy_dir(src: PathArg, dst: PathArg) -> None:
    """Copy a directory tree recursively, creating ``dst`` if needed.

    Symlinked directories are skipped; symlinked files are copied by content.
    """
    src_path = Path(src)
    dst_path = Path(dst)
    dst_path.mkdir(mode=src_path.stat().st_mode & 0o777, parents=True, exist_ok=True)

    for entry in sorted(src_path.iterdir()):
        target = dst_path / entry.name
        if entry.is_symlink() and entry.is_dir():
            logger.warning("Skipping symlinked directory %s", entry)
        elif entry.is_dir():
            copy_dir(entry, target)
        else:
            copy_file(entry, target)


def default_tools_dir() -> Path:
    """Return the artifacts directory installed alongside this package."""
    return Path(__file__).resolve().parent / "resources"


def _missing_artifacts(src_dir: Path, names: Sequence[str]) -> List[Path]:
    return [src_dir / n for n in names if path_type(src_dir / n) is PathType.MISSING]


def copy_config_files(
    src_dir: PathArg,
    list_file: PathArg,
    names: Sequence[str] = CONFIG_FILE_NAMES,
) -> List[Path]:
    """Copy every artifact in ``names`` from ``src_dir`` next to ``list_file``.

    Parameters
    ----------
    src_dir
        Tools directory holding ``.clang-format``, ``.clang-tidy`` and ``cmake/``.
    list_file
        Path of the target ``CMakeLists.txt``.
    names
        Artifact names, copied by exact name.

    Returns
    -------
    list of Path
        Destination paths, in copy order.

    Raises
    ------
    ToolsDirError
        If ``src_dir`` is not a directory, or is the directory holding
        ``list_file``.
    MissingArtifactError
        If any artifact does not exist in ``src_dir``.
    CopyError
        If an OS-level copy fails.
    """
    src_root = Path(src_dir)
    if not src_root.is_dir():
        raise ToolsDirError(f"{src_root} is not a path.")

    dst_root = Path(list_file).resolve().parent
    if src_root.resolve() == dst_root:
        raise ToolsDirError(
            f"{src_root} is the project directory; choose a tools directory outside it."
        )

    missing = _missing_artifacts(src_root, names)
    if missing:
        listing = ", ".join(str(m) for m in missing)
        raise MissingArtifactError(f"{listing} does not exist")

    copied: List[Path] = []
    for name in names:
        src = src_root / name
        dst = dst_root / name
        try:
            if path_type(src) is PathType.DIR:
                copy_dir(src, dst)
            else:
                copy_file(src, dst)
        except OSError as exc:
            raise CopyError(f"copy failed: {src} -> {dst}: {exc}") from exc
        logger.debug("Copied %s -> %s", src, dst)
        click.secho(f"✅ {name} copied to {dst_root}", fg="cyan")
        copied.append(dst)
    return copied
