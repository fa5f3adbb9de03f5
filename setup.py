# setup.py
from setuptools import setup, find_packages

setup(
    name="eta",
    version="0.1.0",
    description="A small Lisp-family language: tokenizer, parser and tree-walking evaluator",
    packages=find_packages(include=["eta", "eta.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["eta = eta.repl:main"],
    },
    zip_safe=False,
)
