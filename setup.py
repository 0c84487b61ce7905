#!/usr/bin/env python
"""Setup script for the refcodec library."""
from pathlib import Path
from setuptools import setup, find_packages

# project root
here = Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

version = "0.1.0"

setup(
    name="refcodec",
    version=version,
    description="Reflection-based text codec for plain-data Python object graphs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="serialization reflection codec json",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    # typing.get_overloads
    python_requires=">=3.11",

    # core dependencies
    install_requires=[
        "numpy>=1.21.0",
        "orjson>=3.8.0",
        "tqdm>=4.65.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "hypothesis>=6.84.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    entry_points={
        "console_scripts": [
            "refcodec=refcodec.cli:main",
        ],
    },

    package_data={
        "refcodec": ["py.typed"],
    },
    include_package_data=True,
)
