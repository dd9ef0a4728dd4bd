"""Package setup for arris_potd."""

from setuptools import setup, find_packages

setup(
    name="arris-potd",
    version="1.0.0",
    description="ARRIS/Commscope cable-modem password-of-the-day generator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "pycryptodome>=3.19.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "arris-potd=arris_potd.cli:main",
        ],
    },
)
