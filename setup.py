from pathlib import Path
from setuptools import find_packages
from setuptools import setup


def read_lines(path):
    """Read lines of `path`."""
    with open(path) as f:
        return f.read().splitlines()


BASE_DIR = Path(__file__).parent

setup(
    name="blogcheck",
    long_description=open(BASE_DIR / "README.md").read(),
    long_description_content_type="text/markdown",
    install_requires=read_lines(BASE_DIR / "requirements.txt"),
    extras_require={"dev": read_lines(BASE_DIR / "requirements_dev.txt")},
    packages=find_packages(exclude=["data", "tests", "tests.*"]),
    version="0.0.0",
    description="Validate blog post form data and email address structure",
    author="india-kerle",
    license="proprietary",
)
