# setup.py
from setuptools import setup, find_packages

setup(
    name="simplisp",
    version="0.1.0",
    description="A small interpreter for a dynamically scoped Lisp dialect",
    packages=find_packages(include=["simplisp", "simplisp.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "loguru",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["simplisp = simplisp.repl:main"],
    },
    zip_safe=False,
)
