#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Setup script for csvToJson package.
"""

from setuptools import setup, find_packages

# Read the README.md for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Main setup configuration
setup(
    name="csvToJson",
    version="0.1.0",
    description="Convert CSV text into formatted JSON with per-cell type inference",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    
    # Package configuration
    packages=find_packages(include=["csvToJson", "csvToJson.*"]),
    python_requires=">=3.10",
    
    # Dependencies
    install_requires=[
        "python-dotenv>=0.21.0",
        "pydantic>=2.0.0",
        "PyYAML>=6.0",
        "pyperclip>=1.8.0"
    ],
    
    # Dev dependencies
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "pylint>=2.15.0",
            "mypy>=1.0.0",
            "black>=23.0.0"
        ]
    },
    
    # Entry points
    entry_points={
        "console_scripts": [
            "csvtojson=csvToJson.__main__:main",
        ],
    },
    
    # Package data
    include_package_data=True,
    
    # Classifiers help users find your project
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing",
    ],
)
