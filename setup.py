# setup.py
from setuptools import setup, find_packages

setup(
    name="polypath",
    version="0.3.0",
    description="Wavefront OBJ parser with object/group/face hierarchy and indexed vertex export",
    packages=find_packages(include=["polypath", "polypath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
