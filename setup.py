from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="Internal markdown link checker for documentation sites",
    packages=find_packages(include=["doclinks", "doclinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12",  # CLI framework
        "pydantic>=2.0",  # Config and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "pyyaml",  # YAML output
        "pygments",  # Highlighting of JSON/YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
