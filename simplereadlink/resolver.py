# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib
from typing import List, Optional

from loguru import logger

from simplereadlink.errors import CycleDetected, HopLimitExceeded
from simplereadlink.primitives import DEFAULT_PRIMITIVES, FilesystemPrimitives, PathType

DEFAULT_MAX_HOPS = 50


def _check_arguments(input_path: PathType, max_hops: int) -> None:
    if not os.fspath(input_path):
        raise ValueError("input_path must be a non-empty path")
    if max_hops < 1:
        raise ValueError(f"max_hops must be at least 1, got {max_hops}")


def follow_link(
    input_path: PathType,
    max_hops: int = DEFAULT_MAX_HOPS,
    *,
    fs: Optional[FilesystemPrimitives] = None,
) -> pathlib.Path:
    """
    Follow the symlink `input_path` through every link in its chain and return the
    absolute path of the first entry that is not a symlink. The final target does not
    need to exist.

    Only the path as a whole is read-linked at each hop; symlinks in intermediate
    directory components are not expanded, and ``..`` is collapsed lexically.

    ---
    Parameters
    ----------
    input_path : str | os.PathLike
        The symlink to follow. Relative paths are anchored at the current working
        directory.
    max_hops : int
        Maximum number of dereferences allowed before giving up. Default 50.
    fs : FilesystemPrimitives, optional
        The filesystem operations to resolve against. Defaults to the host OS.

    ---
    Returns
    -------
    pathlib.Path
        Absolute, lexically normalized path of the final (non-symlink) target.

    ---
    Raises
    ------
    NotASymlinkError
        `input_path` itself is not a symlink. The first dereference is unconditional;
        use `resolve_final_target` to accept plain files as well.
    LinkIOError
        Reading a link in the chain failed.
    CycleDetected
        A link in the chain was reached twice.
    HopLimitExceeded
        The chain is longer than `max_hops` links.

    ---
    Example
    -------
    Given ``/srv/app/current -> releases/v2`` and ``/srv/app/releases/v2 -> ../builds/42``:

        follow_link("/srv/app/current") → /srv/app/builds/42
    """
    _check_arguments(input_path, max_hops)
    fs = fs or DEFAULT_PRIMITIVES

    base = fs.absolute_path_of(input_path)
    anchor = base.parent
    visited: List[pathlib.Path] = [base]

    current = fs.read_link_target(input_path)
    hops = 1
    logger.debug(f"{base} → {current} (hop {hops})")

    while True:
        if not current.is_absolute():
            current = anchor / current
        current = fs.absolute_path_of(current)

        if hops > max_hops:
            raise HopLimitExceeded(
                f"Following {input_path} exceeded the maximum of {max_hops} link dereferences",
                str(input_path),
                max_hops,
            )
        if not fs.is_symlink(current):
            break
        if current in visited:
            raise CycleDetected(
                f"Symlink loop detected following {input_path}: {current} was already visited",
                str(input_path),
                max_hops,
                chain=[str(p) for p in visited + [current]],
            )
        visited.append(current)

        # Relative targets are relative to the directory holding the link being read
        anchor = current.parent
        link = current
        current = fs.read_link_target(link)
        hops += 1
        logger.debug(f"{link} → {current} (hop {hops})")

    result = fs.absolute_path_of(current)
    logger.debug(f"Resolved {input_path} → {result} in {hops} hop(s)")
    return result


def resolve_final_target(
    input_path: PathType,
    max_hops: int = DEFAULT_MAX_HOPS,
    *,
    fs: Optional[FilesystemPrimitives] = None,
) -> pathlib.Path:
    """Like `follow_link`, but a path that is not a symlink resolves to its own absolute form.

    Args:
        input_path (PathType): The path to resolve.
        max_hops (int): Maximum number of dereferences. (Default: 50)
        fs (Optional[FilesystemPrimitives]): Filesystem operations to use.

    Returns:
        pathlib.Path: Absolute, lexically normalized path of the final target.
    """
    _check_arguments(input_path, max_hops)
    fs = fs or DEFAULT_PRIMITIVES
    # Check the normalized form so 'link/' is seen as the link rather than its target
    base = fs.absolute_path_of(input_path)
    if not fs.is_symlink(base):
        return base
    return follow_link(base, max_hops, fs=fs)


class ReadLink:
    """Holds a path so that it can be followed later.

    Example:
        >>> ReadLink.from_path("/path/symlink").follow_link()
    """

    def __init__(self, input_path: PathType, max_hops: int = DEFAULT_MAX_HOPS) -> None:
        self.input_path = input_path
        self.max_hops = max_hops

    @classmethod
    def from_path(cls, path: PathType, max_hops: int = DEFAULT_MAX_HOPS) -> "ReadLink":
        return cls(path, max_hops)

    def follow_link(self, fs: Optional[FilesystemPrimitives] = None) -> pathlib.Path:
        return follow_link(self.input_path, self.max_hops, fs=fs)

    def __repr__(self) -> str:
        return f"ReadLink({os.fspath(self.input_path)!r}, max_hops={self.max_hops})"
