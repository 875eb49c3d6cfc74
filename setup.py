#!/usr/bin/env python3

from setuptools import setup, find_packages
import os
import re


def get_version():
    # Parse the version from cpp_bundle/__init__.py without importing it.
    path = os.path.join(os.path.dirname(__file__), "cpp_bundle", "__init__.py")
    with open(path, encoding="utf-8") as f:
        for line in f:
            m = re.match(r"__version__ = \"(\d+\.\d+\.\d+)\"", line)
            if m:
                return m.group(1)
    raise RuntimeError("no __version__ in " + path)


setup(
    name="cpp-bundle",
    version=get_version(),
    description="Bundle a C++ source file and its local headers into one file.",
    license="Apache License (2.0)",
    packages=find_packages(include=["cpp_bundle"]),
    python_requires=">=3.8",
    install_requires=["pyperclip"],
    entry_points={
        "console_scripts": [
            "cpp-bundle=cpp_bundle.__main__:main",
        ]
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: C++",
        "Topic :: Software Development :: Build Tools"
    ])
