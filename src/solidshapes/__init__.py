"""Shape area calculator demos for the SOLID design principles."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("solidshapes")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
