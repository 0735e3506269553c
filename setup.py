#!/usr/bin/env python3
"""Setup script for pyquake3."""

from setuptools import setup, find_packages
import os

# Read README file
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read version from __init__.py
def get_version():
    version_file = os.path.join("pyquake3", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split('"')[1]
    return "0.1.0"

setup(
    name="pyquake3",
    version=get_version(),
    author="pyquake3 Contributors",
    author_email="",
    description="A Python client for the Quake III getstatus server query",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyquake3", "pyquake3.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.8",
    install_requires=[
        # No external dependencies - uses only standard library
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "flake8",
            "black",
            "mypy",
        ],
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pyquake3-status=pyquake3.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "pyquake3": ["py.typed"],
    },
    keywords="quake3 ioquake3 getstatus server query udp game networking",
    zip_safe=False,
)
