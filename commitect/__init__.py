"""Commit message suggestion tool with cached remote classification."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitect")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
