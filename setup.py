#!/usr/bin/env python3
"""
cptask Installation Script
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="cptask",
    version="0.1.0",
    description="Sample fetching, running and testing utilities for AtCoder contest workspaces",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
        "Topic :: Utilities",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "requests>=2.28.0",
        "beautifulsoup4>=4.11.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
            "types-requests",
        ],
    },
    entry_points={
        "console_scripts": [
            "cptask=cptask.main:main",
        ],
    },
)
