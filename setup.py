from setuptools import find_packages, setup

setup(
    name="loclink",
    version="0.1.0",
    description="Resolvable source-location links for plain-text notes",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config models and command output schemas
        "typer",  # CLI
        "click",  # Used directly by the CLI (exit handling)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "loclink=loclink.cli:main",
        ],
    },
)
