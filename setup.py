from setuptools import find_packages, setup

setup(
    name="linkhook",
    version="0.1.0",
    description="linkhook - deployment-aware link destination resolution for rendered documents",
    packages=find_packages(include=["linkhook", "linkhook.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (last releases running on standalone click)
        "click>=8.2.1",  # Current CLI context
        "rich",  # Terminal formatting
        "jinja2",  # Anchor rendering
        "markupsafe",  # HTML escaping of link titles
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linkhook=linkhook.cli:main",
        ],
    },
)
