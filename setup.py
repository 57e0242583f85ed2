#!/usr/bin/env python3
"""
KVS Setup Script
================
Allows installation of the kvs package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="kvs",
    version="0.1.0",
    packages=find_packages(exclude=("tests", "tests.*", "scripts", "scripts.*")),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "kvs=kvs.cli:run",
        ],
    },
)
