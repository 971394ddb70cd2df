from setuptools import setup, find_packages

setup(
    name="class-comparator",
    version="0.1.0",
    packages=find_packages(include=["src", "src.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0.0",
        "loguru>=0.7.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
