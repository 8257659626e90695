# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="iota",
    version="0.1.0",
    description="A small Lisp-family expression language with lexically scoped closures",
    packages=find_namespace_packages(include=["iota", "iota.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["iota = iota.repl:main"],
    },
    zip_safe=False,
)
