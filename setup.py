# setup.py
from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyax25-netstat",
    version="0.1.0",
    author="Kris Kirby",
    author_email="ke4ahr@example.com",
    description="netstat-style viewer for Linux kernel AX.25 connections",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ke4ahr/pyax25-netstat",
    packages=find_packages(include=["pyax25_netstat", "pyax25_netstat.*"]),
    install_requires=[],
    entry_points={
        "console_scripts": [
            "netstat-ax25=pyax25_netstat.cli:main"
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "Intended Audience :: Telecommunications Industry",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: POSIX :: Linux",
        "Topic :: Communications :: Ham Radio"
    ],
    python_requires=">=3.8",
    extras_require={
        "dev": ["pytest>=7.0", "twine>=4.0"],
        "test": ["pytest>=7.0"]
    },
    keywords=[
        "ax25",
        "packetradio",
        "amateurradio",
        "netstat",
        "procfs"
    ],
    project_urls={
        "Bug Tracker": "https://github.com/ke4ahr/pyax25-netstat/issues"
    },
    license="LGPLv3.0"
)
