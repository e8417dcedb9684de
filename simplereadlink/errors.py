# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List, Optional


class ResolutionError(Exception):
    """Base class for every error raised while following a symlink chain."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class LinkIOError(ResolutionError):
    """A filesystem primitive failed (missing component, permission denied, etc.).

    The underlying ``OSError`` is chained as ``__cause__``.

    Attributes:
        path (Optional[str]): The path the failing primitive was called with.
        errno (Optional[int]): The errno of the underlying ``OSError``, if any.
    """

    def __init__(
        self, message: str, path: Optional[str] = None, errno: Optional[int] = None
    ) -> None:
        super().__init__(message, path)
        self.errno = errno


class NotASymlinkError(LinkIOError):
    """The path being dereferenced is not a symbolic link."""


class HopLimitExceeded(ResolutionError):
    """The chain needed more than ``max_hops`` dereferences."""

    def __init__(self, message: str, path: Optional[str] = None, max_hops: int = 0) -> None:
        super().__init__(message, path)
        self.max_hops = max_hops


class CycleDetected(HopLimitExceeded):
    """A link was reached a second time within a single resolution.

    Attributes:
        chain (List[str]): The links dereferenced so far, in order, ending with
            the link that closes the cycle.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        max_hops: int = 0,
        chain: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message, path, max_hops)
        self.chain: List[str] = list(chain or [])
