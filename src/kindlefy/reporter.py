"""Console presentation for scan results.

Scan logic hands over FileReport models; only this module knows about
colors and layout.
"""

from rich.console import Console

from .config import color_enabled
from .models import FileReport


START_BANNER = "Kindlefy — scanning for Kindle WebBrowser quirks..."
COMPLETE_BANNER = "Scan complete."
MISSING_TARGET_MESSAGE = "Please provide a file or directory."


def make_console() -> Console:
    return Console(no_color=not color_enabled(), emoji=False, highlight=False)


def _print(console: Console, text: str, style: str) -> None:
    # Paths and messages are literal text; never wrap or interpret markup
    console.print(text, style=style, markup=False, soft_wrap=True)


def print_start(console: Console) -> None:
    _print(console, START_BANNER, "magenta")


def print_complete(console: Console) -> None:
    _print(console, f"\n{COMPLETE_BANNER}", "green")


def print_usage_error(console: Console, message: str = MISSING_TARGET_MESSAGE) -> None:
    _print(console, message, "red")


def print_report(console: Console, report: FileReport) -> None:
    """Print the header and advisories for one file; silent if it is clean."""
    if not report.advisories:
        return

    _print(console, f"\nFile: {report.path}", "blue")
    for advisory in report.advisories:
        _print(console, f"• {advisory.message}", "yellow")
