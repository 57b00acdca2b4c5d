"""
Setup script for the ansi_cut package.
"""

from setuptools import find_packages, setup

setup(
    name="ansi_cut",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "ruff>=0.1.0",
        ],
    },
    python_requires=">=3.10",
    description="Cut and chunk strings containing ANSI color codes while keeping their colors",
    author="Daniel",
    author_email="example@example.com",
    url="https://github.com/yourusername/ansi_cut",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
