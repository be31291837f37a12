from pathlib import Path
from setuptools import find_packages, setup

ROOT = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from src/argvfile/__init__.py without importing it."""
    init = ROOT / "src" / "argvfile" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/argvfile/__init__.py")


setup(
    name="argvfile",
    version=_read_version(),
    description="Expand @file option-file hints in argument lists before option parsing",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["argvfile = argvfile.cli:main"]},
)
