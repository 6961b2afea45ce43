"""Setup script for WeatherGrid package."""

from setuptools import setup, find_packages

setup(
    name="weathergrid",
    version="0.1.0",
    description="A grid-based stochastic weather simulator for tabletop worlds",
    author="George Jieh",
    author_email="george.jieh@gmail.com",
    url="https://github.com/georgejieh/EmergenWorld",
    packages=find_packages(include=['src', 'src.*']),
    package_data={
        "": ["*.md", "*.txt"],
    },
    include_package_data=True,
    install_requires=[
        "numpy",
        "scipy",
        "xarray",
        "opensimplex",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
        "Topic :: Games/Entertainment :: Role-Playing",
    ],
    python_requires=">=3.8",
)
