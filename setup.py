from setuptools import setup, find_packages

setup(
    name="raide-sdk",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0"
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
    author="Paul",
    author_email="your.email@example.com",
    description="Raide SDK for the Raide ticketing API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/your-org/raide-sdk",
)
