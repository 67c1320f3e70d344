"""Package setup for tigress_http."""

from setuptools import setup, find_packages

setup(
    name="tigress-http",
    version="2025.9.15",
    description="Verb-named convenience facade over a requests.Session",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tigress-http=tigress_http.cli:main",
        ],
    },
)
