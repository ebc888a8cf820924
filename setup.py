# -*- coding: utf-8 -*-

# system imports
from setuptools import setup, find_packages  # type: ignore


# proceed with actual install
install_requires = [
    "click>=8.0.0",
    "rich>=9.6.0",
    "typing_extensions",
]

dev_requires = [
    "black",
    "flake8",
    "mypy",
    "pytest",
    "pytest-cov",
]

setup(
    name="userstore",
    version="1.0.0",
    description="Validated user records in a single-file SQLite database.",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    setup_requires=["wheel"],
    install_requires=install_requires,
    extras_require={
        "dev": dev_requires,
    },
    zip_safe=False,
    entry_points={
        "console_scripts": ["userstore=userstore.cli:main"],
    },
    python_requires=">=3.11",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: Unix",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
    ],
)
