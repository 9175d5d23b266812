"""A library for mechanical simulation of cells in a tissue."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tissuemech")
except PackageNotFoundError:
    __version__ = "uninstalled"
