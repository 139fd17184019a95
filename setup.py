from setuptools import setup, find_packages

setup(
    name="graphql-to-openapi",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "graphql-core>=3.2",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "graphql-to-openapi=graphql_to_openapi.cli:main",
        ],
    },
    description="Convert GraphQL schemas to OpenAPI 3.0 documents with REST pattern detection",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
)
