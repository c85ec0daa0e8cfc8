"""Setup script for Palindromo"""

from setuptools import setup, find_packages

setup(
    name="palindromo",
    version="0.1.0",
    description="Live palindrome checker for the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "palindromo=palindromo.interfaces.cli:main",
        ],
    },
    python_requires=">=3.8",
)
