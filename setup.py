#!/usr/bin/env python
"""Python package description."""

from pathlib import Path

from setuptools import setup

setup(
    name="pyteslaownerapi",
    version="0.1.0",
    description="Python library and CLI for communicating with the Tesla owner API.",
    long_description=Path("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    license="MIT",
    packages=["pyteslaownerapi"],
    python_requires=">=3.10",
    install_requires=["httpx<1", "rich"],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pytest-asyncio",
            "pytest-httpx>=0.32",
        ],
    },
    entry_points={
        "console_scripts": ["teslaowner=pyteslaownerapi.cli:cli"],
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Operating System :: OS Independent",
    ],
)
