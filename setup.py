from setuptools import find_packages, setup

setup(
    name="qcat",
    version="0.1.0",
    description="qcat - run a catalog of named MongoDB operations against one collection",
    packages=find_packages(include=["qcat", "qcat.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pymongo",  # MongoDB
        "mongomock",  # In-memory MongoDB backend for tests and dry runs
        "pydantic>=2",  # Config, catalog and output validation
        "typer<0.26",  # CLI (0.26+ bundles its own click, breaking click.get_current_context)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "pyyaml",  # YAML catalogs and output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "qcat=qcat.cli:main",
        ],
    },
)
