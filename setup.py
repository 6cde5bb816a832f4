from setuptools import setup, find_packages

setup(
    name="sbom-source-config",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-PyYAML",
        ],
    },
    entry_points={
        "console_scripts": [
            "sbom-source-config=sbom_source_config.cli.main_cli:app",
        ],
    },
    description="Source configuration and SBOM authorship metadata for SBOM generation",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
