# setup.py
from setuptools import setup, find_packages

setup(
    name="liswat",
    version="0.1.0",
    description="A small Scheme interpreter: reader, macro expander and evaluator",
    packages=find_packages(include=["liswat", "liswat.*"]),
    package_data={"liswat": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
