# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy-couch",
    version="0.0.3",
    description="A small Lisp with S-expressions and Q-expressions",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.9",
    install_requires=[
        "lark>=1.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.__main__:main"],
    },
    zip_safe=False,
)
