#!/usr/bin/env python3
"""
Strata - Setup Script
=====================
Pure-Python package over NumPy buffers.
"""

from pathlib import Path

from setuptools import setup, find_packages


# Read version from strata/__init__.py (or define here)
VERSION = "0.1.0"

# Read long description from README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding='utf-8') if readme_path.exists() else ""

setup(
    name="strata",
    version=VERSION,
    author="Aakriti Suresh",
    description="Strata - strided N-dimensional array core",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["strata", "strata.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    python_requires=">=3.8",
)
