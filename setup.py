# setup.py
from setuptools import setup, find_packages

setup(
    name="lispcell",
    version="0.1.0",
    description="A minimal cons-cell Lisp interpreter",
    packages=find_packages(include=["lispcell", "lispcell.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispcell=lispcell.__main__:main"],
    },
    zip_safe=False,
)
