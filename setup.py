# -*- coding: utf-8 -*-

from setuptools import find_packages, setup

extras_require = {
    "test": [
        "pytest>=7.0,<9.0",
        "pytest-cov>=4.0,<6.0",
        "pytest-xdist>=3.0,<4.0",
        "lark>=1.1.9,<2.0",
        "hypothesis[lark]>=6.0,<7.0",
        "eth-abi>=5.0.0,<6.0.0",
    ],
    "lint": [
        "black==23.12.0",
        "flake8==6.1.0",
        "flake8-bugbear==23.12.2",
        "flake8-use-fstring==1.4",
        "isort==5.13.2",
        "mypy==1.5",
    ],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


setup(
    name="abiparse",
    version="0.1.0",
    description="abiparse: parse Ethereum ABI type names and JSON ABI parameters",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="abiparse contributors",
    author_email="",
    license="Apache License 2.0",
    keywords="ethereum evm abi solidity types parser",
    include_package_data=True,
    packages=find_packages(include=["abiparse", "abiparse.*"]),
    python_requires=">=3.10,<4",
    install_requires=[],
    tests_require=extras_require["test"],
    extras_require=extras_require,
    entry_points={"console_scripts": ["abiparse=abiparse.cli.abiparse_cli:_parse_cli_args"]},
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
