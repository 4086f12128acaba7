import os

from setuptools import find_packages, setup

setup(
    name="immuta",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.84",
        ],
    },
    author="Immuta Contributors",
    description="Immutable transformations and fluent chaining over dicts and lists",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
