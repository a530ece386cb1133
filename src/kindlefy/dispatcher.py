"""Route files to the scanner for their category."""

import logging
import os
from typing import Callable, Iterable, Optional

from .models import Advisory, FileCategory, FileReport
from .scanners import scan_markup, scan_script, scan_stylesheet

logger = logging.getLogger(__name__)


# Exact, case-sensitive: "app.JS" is unsupported
EXTENSION_CATEGORIES: dict[str, FileCategory] = {
    ".js": FileCategory.SCRIPT,
    ".ts": FileCategory.TYPED_SCRIPT,
    ".html": FileCategory.MARKUP,
    ".css": FileCategory.STYLESHEET,
}

# TypeScript compiles to JS, same issues apply
CATEGORY_SCANNERS: dict[FileCategory, Callable[[str], list[Advisory]]] = {
    FileCategory.SCRIPT: scan_script,
    FileCategory.TYPED_SCRIPT: scan_script,
    FileCategory.MARKUP: scan_markup,
    FileCategory.STYLESHEET: scan_stylesheet,
}


def categorize(path: str) -> FileCategory:
    """Map a file path to its category by extension."""
    _, ext = os.path.splitext(path)
    return EXTENSION_CATEGORIES.get(ext, FileCategory.UNSUPPORTED)


def read_text(path: str) -> str:
    """Read a file as UTF-8. OSError propagates to the caller."""
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        return handle.read()


def scan_file(path: str) -> Optional[FileReport]:
    """
    Scan one file.

    Returns None for unsupported extensions without touching the file;
    otherwise a FileReport, possibly with no advisories.
    """
    category = categorize(path)
    if category is FileCategory.UNSUPPORTED:
        logger.debug(f"Skipping unsupported file: {path}")
        return None

    logger.debug(f"Scanning {path} as {category.value}")
    text = read_text(path)
    advisories = CATEGORY_SCANNERS[category](text)
    return FileReport(path=path, category=category, advisories=advisories)


def scan_paths(paths: Iterable[str]) -> list[FileReport]:
    """Scan paths in order, returning a report for every supported file."""
    reports = []
    for path in paths:
        report = scan_file(path)
        if report is not None:
            reports.append(report)
    return reports
