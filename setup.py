from setuptools import find_packages, setup

setup(
    name="launchsvc",
    version="0.1.0",
    description="Start, stop and restart macOS launchd services via launchctl",
    author="William Wieselquist",
    packages=find_packages(include=["launchsvc", "launchsvc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schema validation
        "typer>=0.9",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "launchsvc=launchsvc.cli:main",
        ],
    },
)
