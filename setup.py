#!/usr/bin/env python

import os
import re

from setuptools import setup, find_packages


# Determine package version without importing the package
def read_version():
    init = os.path.join(os.path.dirname(__file__), "statnotes", "__init__.py")
    with open(init, "r", encoding="utf8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1) if match else "0.1.0"


VERSION = read_version()

# Package metadata
DISTNAME = "statnotes"
DESCRIPTION = "Runnable narrative notes on statistics and machine learning"
LONG_DESCRIPTION = open('README.md', 'r', encoding='utf8').read()
MAINTAINER = "Laurent Kouadio"
MAINTAINER_EMAIL = 'etanoyau@gmail.com'
LICENSE = "BSD-3-Clause"
KEYWORDS = "statistics, machine learning, tutorials, regression, classification"

# Package data specification
PACKAGE_DATA = {
    'statnotes': [
        '_snlog.yml',
        'datasets/data/*.csv',
    ],
}

setup_kwargs = {
    'entry_points': {
        'console_scripts': [
            'statnotes=statnotes.cli:cli',
        ]
    },
    'packages': find_packages(exclude=["tests", "tests.*"]),
    'install_requires': [
        "numpy>=1.23",
        "pandas>=1.5",
        "scipy>=1.9.0",
        "scikit-learn>=1.3",
        "statsmodels>=0.13.1",
        "patsy>=0.5.3",
        "matplotlib>=3.5.3",
        "seaborn>=0.12.0",
        "pyyaml>=5.0.0",
        "tqdm>=4.64.1",
        "joblib>=1.2.0",
        "click>=8.0",
        "openpyxl>=3.0.3",
    ],
    'extras_require': {
        "dev": [
            "pytest",
        ]
    },
    'python_requires': '>=3.9'
}

setup(
    name=DISTNAME,
    version=VERSION,
    author=MAINTAINER,
    author_email=MAINTAINER_EMAIL,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license=LICENSE,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
    ],
    keywords=KEYWORDS,
    zip_safe=False,
    package_data=PACKAGE_DATA,
    **setup_kwargs
)
