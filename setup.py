from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gridgraph",
    version="0.1.0",
    description="Graph construction, chain contraction and 2D grid tools for puzzle solving.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    package_data={"gridgraph.schemas": ["*.json"]},
    install_requires=["jsonschema", "networkx", "pyyaml"],
    extras_require={"test": ["pytest"]},
)
