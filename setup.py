from setuptools import find_packages, setup

setup(
    name="ci-term",
    version="0.1.0",
    packages=find_packages(
        include=[
            "ci_common",
            "ci_common.*",
            "ci_client",
            "ci_client.*",
            "ci_service",
            "ci_service.*",
            "ci_term",
            "ci_term.*",
        ]
    ),
    install_requires=[
        "requests>=2.31.0",
        "click>=8.1.0",
        "rich>=13.3.0",
        "textual>=0.47.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-xdist>=3.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ci-term=ci_term.cli:main",
        ],
    },
    python_requires=">=3.11",
)
