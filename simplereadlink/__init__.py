# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata

from .errors import (
    CycleDetected,
    HopLimitExceeded,
    LinkIOError,
    NotASymlinkError,
    ResolutionError,
)
from .primitives import FilesystemPrimitives
from .resolver import DEFAULT_MAX_HOPS, ReadLink, follow_link, resolve_final_target

try:
    __version__ = importlib.metadata.version("simplereadlink")
except importlib.metadata.PackageNotFoundError:
    __version__ = ""

__all__ = [
    "DEFAULT_MAX_HOPS",
    "CycleDetected",
    "FilesystemPrimitives",
    "HopLimitExceeded",
    "LinkIOError",
    "NotASymlinkError",
    "ReadLink",
    "ResolutionError",
    "follow_link",
    "resolve_final_target",
]
