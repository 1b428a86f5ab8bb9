from setuptools import setup, find_packages

setup(
    name="substriter",
    version="0.1.0",
    description="Sliding-window iteration over text by fixed numbers of characters",
    author="Your Name",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "substriter=substriter.cli:main",
        ],
    },
    python_requires=">=3.9",
)
