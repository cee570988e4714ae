"""
Setup script for the hash brute-force search package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="hash-bruteforce",
    version="0.1.0",
    author="Hash Bruteforce Team",
    author_email="example@example.com",
    description="Exhaustive digest search over short fixed-alphabet strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/hash-bruteforce",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.7",
    install_requires=[
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hash-bruteforce=hash_bruteforce.cli:main",
        ],
    },
)
