# setup.py
from setuptools import setup, find_packages

setup(
    name="wavemesh",
    version="1.0.0",
    description="Wavefront OBJ/MTL importer producing render-ready vertex and index buffers",
    packages=find_packages(include=["wavemesh", "wavemesh.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["wavemesh=wavemesh.__main__:main"],
    },
)
