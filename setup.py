# setup.py
from setuptools import setup, find_packages

setup(
    name="vecspace",
    version="1.0.0",
    description="Mutable 3-D vectors, vector spaces and image/text point clouds",
    packages=find_packages(include=["vecspace", "vecspace.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=10.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
