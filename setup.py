from setuptools import setup, find_packages

setup(
    name="paramguard",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "flask>=3.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0"
        ]
    },
    python_requires=">=3.10",
)
