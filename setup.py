from setuptools import find_packages, setup

setup(
  name="ladder448",
  version="0.1.0",
  author="Ladder448 developers",
  description="X448 (Curve448 Diffie-Hellman) scalar multiplication in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["ladder448 = ladder448.cli.__main__:main"]),
)
