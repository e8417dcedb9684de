# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="simplereadlink",
    version="0.1.0",
    description="Follow symbolic link chains to their final target, even if it does not exist",
    license="MIT",
    packages=find_packages(include=["simplereadlink", "simplereadlink.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",  # Command line interface
        "loguru",  # Logging
        "tomlkit",  # Config file that preserves comments
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "simplereadlink=simplereadlink.__main__:main",
        ],
    },
)
