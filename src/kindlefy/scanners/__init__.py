"""Rule scanners, one per supported file category."""

from .script import scan_script
from .markup import scan_markup
from .stylesheet import scan_stylesheet

__all__ = ["scan_script", "scan_markup", "scan_stylesheet"]
