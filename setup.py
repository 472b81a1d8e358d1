from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Read `__version__` from the package without importing it."""

    init = ROOT / "src" / "morbodb" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__ in src/morbodb/__init__.py")


setup(
    name="morbodb",
    version=_read_version(),
    description="In-memory database, mostly-compatible clone of MongoDB",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
)
