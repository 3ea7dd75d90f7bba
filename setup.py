"""
Setup Configuration for linsgd
==============================

Installation options:
- pip install linsgd          # core (numpy, pyyaml)
- pip install linsgd[dev]     # test and lint tooling
"""

from pathlib import Path

from setuptools import find_packages, setup

# Get the directory containing setup.py
HERE = Path(__file__).parent.resolve()


def read_readme():
    """Read README file for long description."""
    readme_path = HERE / "README.md"
    if readme_path.exists():
        return readme_path.read_text(encoding="utf-8")
    return "Linear regression by mini-batch stochastic gradient descent"


def read_version():
    """Read version from package __init__.py."""
    init_path = HERE / "linsgd" / "__init__.py"
    if init_path.exists():
        with open(init_path, encoding="utf-8") as f:
            for line in f:
                if line.startswith("__version__"):
                    return line.split("=")[1].strip().strip("\"'")
    return "1.0.0"


INSTALL_REQUIRES = [
    "numpy>=1.21.0",
    "pyyaml>=5.4.0",
]

EXTRAS_REQUIRE = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.82.0",
        "black>=21.0.0",
        "ruff>=0.0.290",
        "mypy>=0.910",
    ],
    "test": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.82.0",
    ],
}

EXTRAS_REQUIRE["all"] = sorted(set(sum(EXTRAS_REQUIRE.values(), [])))

ENTRY_POINTS = {
    "console_scripts": [
        "linsgd=linsgd.cli.main:main",
    ]
}

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Mathematics",
    "License :: OSI Approved :: MIT License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Operating System :: OS Independent",
]

KEYWORDS = [
    "linear regression", "stochastic gradient descent", "mini-batch",
    "optimization", "learning curves", "bias variance",
]


setup(
    name="linsgd",
    version=read_version(),
    description="Linear regression by mini-batch stochastic gradient descent",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    author="linsgd Development Team",
    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    python_requires=">=3.10",
    entry_points=ENTRY_POINTS,
    classifiers=CLASSIFIERS,
    keywords=KEYWORDS,
    license="MIT",
    zip_safe=False,
)
