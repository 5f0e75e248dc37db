from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()

setup(
    name="chirpsig",
    version="0.1.0",
    description="Recurrence based complex tone and linear chirp generation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="ChirpSig Team",
    packages=find_packages(include=["chirpsig", "chirpsig.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
    },
)
