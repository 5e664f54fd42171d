from setuptools import setup, find_packages

setup(
    name="GammaLUT",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest", "matplotlib"],
    },
    description="Precomputed gamma encoding/decoding lookup tables",
)
