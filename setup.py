#!/usr/bin/env python
"""A setuptools-based script for installing extarg."""

# Note: this lets older build tooling that only knows `setup.py install`
#       build the package while the metadata stays in pyproject.toml.

import setuptools

if __name__ == "__main__":
    setuptools.setup()
