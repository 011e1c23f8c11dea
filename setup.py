from setuptools import find_packages, setup

setup(
    name="qalink",
    version="0.1.0",
    description="Question/answer cross-reference extraction and id validation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Scanner configuration model
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "rich",  # Console output for scripts/
            "mutmut>=3.4.0",  # Mutation testing
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
