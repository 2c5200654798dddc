from os.path import exists

from setuptools import find_packages, setup

description = open("README.md").read() if exists("README.md") else ""

setup(
    name="mariaddl",
    description="Renders MariaDB / MySQL DDL fragments from schema metadata.",
    long_description=description,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    packages=find_packages(include=["mariaddl", "mariaddl.*"]),
    package_data={"": ["py.typed"]},
    use_scm_version={
        "write_to": "mariaddl/_version.py",
        "fallback_version": "0.0.0",
        "local_scheme": "no-local-version",
    },
    setup_requires=["setuptools_scm"],
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0.0",
        "ruamel.yaml",
        "sqlglot",
    ],
    extras_require={
        "dev": [
            "mypy~=1.13.0",
            "pre-commit",
            "pytest",
            "pytest-mock",
            "ruff~=0.7.0",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: SQL",
        "Programming Language :: Python :: 3 :: Only",
    ],
)
