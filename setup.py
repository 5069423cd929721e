#!/usr/bin/env python
"""
Setup.py for pyweightgraph.
"""

from setuptools import setup, find_packages

setup(
    name="pyweightgraph",
    version="0.1.0",
    description="Undirected weighted graph container with shortest path, spanning tree and diameter analyses",
    packages=find_packages(include=["weightgraph", "weightgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
