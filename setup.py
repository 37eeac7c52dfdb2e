from setuptools import setup, find_packages

setup(
    name="simple-matrix",
    version="0.1.0",
    description="A small generic fixed-size dense matrix with element-wise and linear-algebra operators",
    packages=find_packages(include=["simple_matrix", "simple_matrix.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "loguru>=0.6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
