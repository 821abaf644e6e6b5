"""Installed version of formurlcodec, read from package metadata."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "formurlcodec"

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Running from a source tree that was never installed.
    __version__ = "unknown"
