#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: setup.py
# AI-SUMMARY: Package installation config.

"""
audio-split package installation config
"""

from setuptools import setup, find_packages

# Read the README
def read_readme():
    with open("README.md", "r", encoding="utf-8") as f:
        return f.read()

# Read requirements.txt
def read_requirements():
    with open("requirements.txt", "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="audio-split",
    version="1.0.0",
    description="Split one recording into sample-accurate WAV segments bundled in a ZIP archive",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    author="BDM Team",
    author_email="bdm@example.com",
    url="https://github.com/bdm/audio-split",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={
        "audio_split.config": ["config.yaml"],
    },
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
        "test": [
            "pytest>=6.0",
            "pytest-cov",
        ]
    },
    entry_points={
        "console_scripts": [
            "audio-split=audio_split.cli:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Sound/Audio :: Conversion",
    ],
    keywords="audio, splitting, wav, zip, segments",
    project_urls={
        "Source": "https://github.com/bdm/audio-split",
        "Tracker": "https://github.com/bdm/audio-split/issues",
    },
)
