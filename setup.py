#!/usr/bin/env python
import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))


def version():
    with open(os.path.join(current_dir, "ratnum", "__init__.py")) as f:
        return re.search(r'__version__ = "(.+)"', f.read()).group(1)


setup(
    name="ratnum",
    version=version(),
    description="Exact rational number arithmetic",
    packages=["ratnum"],
    python_requires=">=3.7",
    install_requires=[
        "numpy"
    ]
)
