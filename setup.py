# setup.py

from setuptools import setup, find_packages

setup(
    name="bitonic_tour",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Exact O(n^2) dynamic programme for the shortest bitonic euclidean tour",
    packages=find_packages(exclude=["tests*", "benchmark*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "bitonic-tour=bitonic_tour.cli:main",
        ],
    },
)
