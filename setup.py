"""Packaging for the GitLab member roles SDK."""

from setuptools import find_namespace_packages, setup

setup(
    name="gitlab-sdk",
    version="0.1.0",
    description="Async Python client for the GitLab member roles API",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["gitlab_sdk*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.11",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
        ],
    },
)
