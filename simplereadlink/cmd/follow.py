# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import sys
from typing import Optional, Tuple

import click
from loguru import logger

from simplereadlink.configmanager import get_config_manager
from simplereadlink.errors import ResolutionError
from simplereadlink.resolver import follow_link, resolve_final_target


@click.command("follow")
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=True, file_okay=True))
@click.option(
    "--max-hops",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of links to dereference (default: resolver.max_hops setting, or 50)",
)
@click.option(
    "--allow-non-symlink",
    is_flag=True,
    default=False,
    help="Print the absolute path of inputs that are not symlinks instead of failing",
)
def follow(paths: Tuple[str, ...], max_hops: Optional[int], allow_non_symlink: bool):
    """Print the final target of each symlink in PATHS, even if it does not exist."""
    if max_hops is None:
        max_hops = get_config_manager().get_max_hops()
    resolve = resolve_final_target if allow_non_symlink else follow_link

    failed = False
    for path in paths:
        try:
            click.echo(str(resolve(path, max_hops)))
        except ResolutionError as e:
            logger.error(f"{path}: {e}")
            failed = True
    if failed:
        sys.exit(1)
