"""
Setup script for DiaLens
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="dialens",
    version="1.0.0",
    description="Hypoglycaemia risk lens for insulin electronic product information (ePI)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="DiaLens Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run_lens"],
    install_requires=[
        "beautifulsoup4",
        "python-dotenv",
        "rapidfuzz",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "dialens=run_lens:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Healthcare Industry",
        "Topic :: Text Processing :: Markup :: HTML",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
