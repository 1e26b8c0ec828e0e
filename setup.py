# setup.py
from setuptools import setup, find_packages

setup(
    name="vec3kit",
    version="1.0.0",
    description="Immutable 3-D vector value type on top of NumPy",
    packages=find_packages(include=["vec3kit", "vec3kit.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
