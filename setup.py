#!/usr/bin/env python3
"""
Setup script for segchain
"""

from setuptools import setup, find_packages

setup(
    name="pysegchain",
    version="0.1.0",
    description="Interval algebra over unsigned 32-bit positions: segments and ordered chains",
    author="RD Schaeffer",
    author_email="dustin.schaeffer@gmail.com",
    packages=find_packages(include=["segchain", "segchain.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "numpy>=1.22.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
