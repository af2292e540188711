from setuptools import find_packages, setup

setup(
    name="wikilink-resolver",
    version="0.1.0",
    description="Pluggable policies that resolve wikilinks to link destinations",
    packages=find_packages(include=["wikilink", "wikilink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code relies on standalone click)
        "click",  # CLI context and exceptions (imported directly)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "wikilink=wikilink.cli:main",
        ],
    },
)
