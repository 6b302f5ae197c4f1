"""MTG Arena log reader and uploader."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

try:
    __version__ = pkg_version("gathering")
except PackageNotFoundError:
    __version__ = "0.0.0"
