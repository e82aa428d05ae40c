"""
Setup script for contrast-drill.

contrast-drill selects distractors for vocabulary-pair contrasting
exercises. Each trial pairs a target translation with two distractors
whose foreign forms are orthographically close to it, at a difficulty
level that is either fixed or advanced round by round.

The 'contrast' command previews tiers and trial sequences from a
CSV or YAML vocabulary file.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="contrast-drill",
    version="0.1.0",
    description="Similarity-tiered distractor selection for vocabulary contrasting exercises",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Similarity
        "rapidfuzz>=3.0.0",
        # Vocabulary files
        "pyyaml>=6.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "contrast=src.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning vocabulary distractors levenshtein education",
)
