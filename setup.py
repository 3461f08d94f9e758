import os

from setuptools import find_packages, setup

setup(
    name="structural-types",
    version="0.1.0",
    packages=find_packages(include=["structural_types", "structural_types.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    author="Structural Types Contributors",
    description="Composable runtime schemas whose shape is the type, with a Result-based API",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
