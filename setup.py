#!/usr/bin/env python3
"""
Setup script for the Sales Dashboard.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="sales-dashboard",
    version="1.0.0",
    description="Live sales dashboard over a Firebase Realtime Database",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas<3",
        "firebase-admin",
        "requests",
        "streamlit>=1.39",
        "plotly",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "sales-dashboard-cli=sales_dashboard.cli.sales_dashboard_cli:main",
        ],
    },
)
