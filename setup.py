#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="targetprops",
    version="0.1.0",
    description="Compilation target properties: triple matching, CPU feature resolution and property merging",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "json5",
        "PyYAML",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "targetprops=targetprops.cli:main",
        ],
    },
)
