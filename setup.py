from setuptools import find_packages, setup

setup(
    name="modified",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    license="MIT License",
    description="Value containers which track whether their value has been modified",
    install_requires=[
        "attrs>=22.2.0",
        "typing_extensions>=4.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
