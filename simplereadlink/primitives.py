# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
import os
import pathlib
from typing import Union

from simplereadlink.errors import LinkIOError, NotASymlinkError

PathType = Union[str, "os.PathLike[str]"]


class FilesystemPrimitives:
    """Host filesystem operations consumed by the link resolver.

    The default implementation talks to the operating system through ``os``.
    Subclasses can override individual methods to resolve against something other
    than the live filesystem (e.g. an in-memory tree in tests). None of the methods
    modify the filesystem.
    """

    def read_link_target(self, path: PathType) -> pathlib.Path:
        """Return the literal target stored in the symlink at `path`, unresolved.

        Args:
            path (PathType): Path naming a symbolic link.

        Returns:
            pathlib.Path: The raw link target, which may be relative.

        Raises:
            NotASymlinkError: `path` exists but is not a symbolic link.
            LinkIOError: The link metadata could not be read.
        """
        try:
            return pathlib.Path(os.readlink(path))
        except OSError as e:
            if e.errno == errno.EINVAL:
                raise NotASymlinkError(f"{path} is not a symbolic link", str(path), e.errno) from e
            raise LinkIOError(
                f"Unable to read link {path}: {e.strerror or e}", str(path), e.errno
            ) from e

    def is_symlink(self, path: PathType) -> bool:
        # islink() reports False for paths that don't exist or can't be stat'd
        return os.path.islink(path)

    def absolute_path_of(self, path: PathType) -> pathlib.Path:
        """Lexically normalize `path` into an absolute path.

        Relative paths are anchored at the current working directory, then ``.``,
        ``..`` and redundant separators are collapsed. Links are never followed.
        """
        path = os.fspath(path)
        if not os.path.isabs(path):
            path = os.path.join(self.current_working_directory(), path)
        return pathlib.Path(os.path.normpath(path))

    def current_working_directory(self) -> pathlib.Path:
        try:
            return pathlib.Path(os.getcwd())
        except OSError as e:
            raise LinkIOError(
                f"Unable to determine the current working directory: {e.strerror or e}",
                errno=e.errno,
            ) from e


DEFAULT_PRIMITIVES = FilesystemPrimitives()
