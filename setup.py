from setuptools import find_namespace_packages, setup

setup(
    name="docshim",
    version="0.1.0",
    description="Collection-scoped CRUD facade over a MongoDB driver",
    packages=find_namespace_packages(include=["docshim", "docshim.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo>=4.2",  # MongoDB driver (pymongo.timeout needs 4.2)
        "mongomock",  # In-memory MongoDB backend
        "pydantic>=2",  # Config and typed query options
        "uvicorn",  # HTTP server bootstrap
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
