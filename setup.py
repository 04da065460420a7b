from setuptools import find_namespace_packages, setup

setup(
    name="filepattern",
    version="0.1.0",
    description="Glob-style file patterns with captures, substitution and multi-pattern directory walks",
    packages=find_namespace_packages(include=["filepattern", "filepattern.*"]),
    python_requires=">=3.12",
    install_requires=[
        "result",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
