"""setuptools setup for SoloQuest.

Install for development:
    pip install -e ".[test]"
    python -m soloquest
"""

from setuptools import setup, find_packages

setup(
    name="SoloQuest",
    version="0.1.0",
    packages=find_packages(include=["soloquest", "soloquest.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["soloquest=soloquest.__main__:main"],
    },
)
