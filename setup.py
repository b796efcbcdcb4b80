#!/usr/bin/env python3
"""Setup script for lcs_linkage package.
"""

from setuptools import find_packages, setup

setup(
    name="lcs_linkage",
    version="1.0.0",
    description="Repeated longest common substring similarity for record linkage",
    author="LCS Linkage Team",
    packages=find_packages(include=["lcs_linkage*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.23.0",
        "pandas>=1.5.0",
        "rapidfuzz>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
)
