"""Setup script for the shared-library dependency analyzer."""

from setuptools import setup, find_packages

setup(
    name="so-dependency-analyzer",
    version="0.1.0",
    description="Find dependency paths and trees between shared libraries",
    author="so-dependency-analyzer developers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "networkx>=3.2.1",
        "pyyaml>=6.0.1",
        "click>=8.2.0",
        "rich>=13.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.4",
        ]
    },
    entry_points={
        "console_scripts": [
            "so-deps=so_analyzer.cli:cli",
        ]
    },
)
