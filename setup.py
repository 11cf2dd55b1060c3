"""
Setup script for terminal progress indicators.
"""

from setuptools import setup, find_packages

setup(
    name="taskprogress",
    version="0.1.0",
    description="Flicker-free terminal progress indicators for concurrent tasks",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Task Progress Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "taskprogress-demo=taskprogress.__main__:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
