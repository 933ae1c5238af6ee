""" ecgroup build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecgroup

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecgroup.name,
    version=ecgroup.__version__,
    license=ecgroup.__license__,
    author=ecgroup.__author__,
    author_email=ecgroup.__author_email__,
    description="Elliptic curve groups over small prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields group-order cyclic-subgroup "
        "legendre-symbol quadratic-residues number-theory"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
