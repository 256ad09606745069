"""setup.py

Setup script for the sqlbuilder library

Notes
-----

- Replaces the need for requirements.txt


"""
import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# This call to setup() does all the work
setup(
    name="sqlbuilder",
    version="0.1.0",
    description="A minimal Python library to build raw SQL queries and bulk inserts.",
    long_description=README,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Database",
    ],
    python_requires='>=3.10',
    packages=["sqlbuilder"],
    include_package_data=True,
    install_requires=['typing_extensions'],
    extras_require={
        'dev': ['flake8',
                'ipdb',
                'ipython',
                'pytest',
                'pytest-cov',
                ]},
)
