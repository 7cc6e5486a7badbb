from setuptools import setup, find_packages

setup(
    name="mynl",
    version="0.1.0",
    description="Add trailing, column-aligned line-number comments to code snippets",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mynl=mynl.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
