"""Setup script for the Skybrush show format package."""

from setuptools import setup, find_packages


requires = [
    "click>=8.0.0",
    "colorlog>=6.0.0",
    "python-dotenv>=0.10.3",
    "trio>=0.23.0",
]

__version__ = None
exec(open("src/show_format/version.py").read())

setup(
    name="skybrush-show-format",
    version=__version__,
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=requires,
    extras_require={"test": ["pytest>=7.0.0", "pytest-trio>=0.8.0"]},
    setup_requires=[],
    entry_points={"console_scripts": ["skyc = show_format.launcher:start"]},
)
