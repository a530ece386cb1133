"""Kindle web engine baselines.

Reference data only. The scanners flag constructs that the oldest engines in
this table cannot handle; nothing here changes which rules run.
"""

from .models import CompatibilityEntry


# Kindle ColorSoft firmware support
COLORSOFT_VERSIONS: dict[str, CompatibilityEntry] = {
    "ColorSoft 1.0": CompatibilityEntry(
        name="ColorSoft 1.0",
        engine_version="538.1",
        notes="Early e-ink color WebKit variant",
    ),
    "ColorSoft 1.2": CompatibilityEntry(
        name="ColorSoft 1.2",
        engine_version="538.3",
        notes="Improved CSS handling and partial Grid",
    ),
    "ColorSoft 2.0": CompatibilityEntry(
        name="ColorSoft 2.0",
        engine_version="540.0",
        notes="Most capable; broader ES6 support",
    ),
}

# Other Kindle model WebKit baselines
KINDLE_MODELS: dict[str, CompatibilityEntry] = {
    "Kindle 4/5 (E-Ink)": CompatibilityEntry(
        name="Kindle 4/5 (E-Ink)",
        engine_version="534.x",
        notes="Ancient WebKit; barely supports modern JS; no flexbox.",
    ),
    "Kindle Paperwhite 1": CompatibilityEntry(
        name="Kindle Paperwhite 1",
        engine_version="534.x",
        notes="Same era as Kindle 5; JS support extremely limited.",
    ),
    "Kindle Paperwhite 2": CompatibilityEntry(
        name="Kindle Paperwhite 2",
        engine_version="537.x",
        notes="Slightly newer; still pre-flexbox and missing many ES5 features.",
    ),
    "Kindle Paperwhite 3": CompatibilityEntry(
        name="Kindle Paperwhite 3",
        engine_version="537.x",
        notes="Marginal improvements; still no CSS variables or flexbox.",
    ),
    "Kindle Paperwhite 4": CompatibilityEntry(
        name="Kindle Paperwhite 4",
        engine_version="538.x",
        notes="Better CSS parsing; some ES6 works but inconsistently.",
    ),
    "Kindle Oasis (all gens)": CompatibilityEntry(
        name="Kindle Oasis (all gens)",
        engine_version="538–539 range",
        notes="Fastest pre-color Kindles; partial flexbox but buggy; no fetch().",
    ),
    "Kindle Scribe": CompatibilityEntry(
        name="Kindle Scribe",
        engine_version="539–540 range",
        notes="Closest to ColorSoft 2.0; best JS support in any monochrome Kindle.",
    ),
}


def all_entries() -> list[CompatibilityEntry]:
    """Return every known baseline, ColorSoft firmware first."""
    return [*COLORSOFT_VERSIONS.values(), *KINDLE_MODELS.values()]


def get_entry(name: str) -> CompatibilityEntry:
    """Look up a device or firmware by name. Raises KeyError if unknown."""
    if name in COLORSOFT_VERSIONS:
        return COLORSOFT_VERSIONS[name]
    return KINDLE_MODELS[name]
