"""
hpmath: Arbitrary-Precision Transcendental Engine

Square root and inverse trigonometric functions to a configurable number of
decimal digits:
1. Newton square root
2. Arctangent by Taylor series with Euler range reduction
3. Arcsine / arccosine through arctangent
4. A shared convergence loop controller
"""

from setuptools import setup, find_packages

setup(
    name="hpmath",
    version="1.0.0",
    description="Arbitrary-precision square root and inverse trigonometric functions",
    author="hpmath developers",
    python_requires=">=3.10",
    packages=find_packages(include=["hpmath", "hpmath.*"]),
    install_requires=[
        "mpmath>=1.3.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "tabulate>=0.9",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
