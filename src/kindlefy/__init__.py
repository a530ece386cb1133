"""Static linter for Kindle WebBrowser compatibility quirks."""

from .compat import COLORSOFT_VERSIONS, KINDLE_MODELS
from .dispatcher import scan_file, scan_paths
from .models import Advisory, CompatibilityEntry, FileCategory, FileReport

__all__ = [
    "COLORSOFT_VERSIONS",
    "KINDLE_MODELS",
    "scan_file",
    "scan_paths",
    "Advisory",
    "CompatibilityEntry",
    "FileCategory",
    "FileReport",
]
