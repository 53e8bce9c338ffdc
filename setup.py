#!/usr/bin/env python3
# coding: utf-8

from setuptools import setup


setup(
    name='osrelease',
    version="0.1",
    python_requires=">= 3.12",
    description="Parse os-release operating system identification files",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="GPLV2+",
    # It does not make much sense to run pip install without installing also
    # coloredlogs and texttable, although osrelease is able to work without
    # them
    install_requires=["pyyaml", "coloredlogs", "texttable"],
    packages=['osrelease', "osrelease.cli", "osrelease.utils"],
    scripts=['osrelease-info'],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Topic :: System :: Operating System",
    ],
)
