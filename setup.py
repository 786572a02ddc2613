import re

from setuptools import find_packages, setup

version = re.search(r'__version__ = "(.+)"', open("montladder/__init__.py").read())[1]

setup(
  name="montladder",
  version=version,
  description="Montgomery ladder scalar multiplication for Curve25519 and other Montgomery curves",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "pynacl>=1.4", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
)
