from setuptools import setup, find_packages
setup(
    name="sample_hash",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=["xxhash"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
)
