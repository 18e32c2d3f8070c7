"""
Operator text → inches.

Stock lengths arrive as "20'", "21 ft", "240" or "40\"". Thicknesses arrive
as sheet gauges ("11 ga") or fractions ("3/8\"", "1-1/4\""). Nothing here
raises on bad text: callers get the default back and treat it as
"not entered yet".
"""

import math
import re

# Sheet gauge to thickness (inches), mild steel
GAUGE_TO_INCHES = {
    "24ga": 0.0239,
    "20ga": 0.0359,
    "16ga": 0.0598,
    "14ga": 0.0747,
    "12ga": 0.1046,
    "11ga": 0.1196,
    "10ga": 0.1345,
}

_FRACTIONS = [
    (0.125, "1/8"), (0.25, "1/4"), (0.375, "3/8"), (0.5, "1/2"),
    (0.625, "5/8"), (0.75, "3/4"), (0.875, "7/8"),
]

_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?|\.\d+)")
_FEET_INCHES_RE = re.compile(
    r"^\s*(\d+(?:\.\d+)?)\s*(?:'|ft)\s*-?\s*(\d+(?:\.\d+)?)\s*(?:\"|in)?\s*$"
)
_MIXED_RE = re.compile(r"^(\d+)\s*-\s*(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input."""
    if value is None:
        return default
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    # "nan", "inf" and "1e999" parse as floats but are not measurements
    return number if math.isfinite(number) else default


def parse_int(value, default: int = 0) -> int:
    """Parse an integer from user input."""
    if value is None:
        return default
    try:
        return int(float(str(value).strip()))
    except (ValueError, TypeError, OverflowError):
        return default


def parse_length_inches(value, default: float = 0.0) -> float:
    """
    Parse a stock length to inches.

    "20'" and "20 ft" are feet, "20' 6\"" is feet and inches, anything else
    is inches. Numbers are accepted as inches.
    """
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default
    raw = str(value).strip().lower()
    if not raw:
        return default

    m = _FEET_INCHES_RE.match(raw)
    if m:
        inches = float(m.group(1)) * 12.0 + float(m.group(2))
        return inches if math.isfinite(inches) else default

    m = _NUMBER_RE.search(raw)
    if not m:
        return default
    number = float(m.group(1))
    if "'" in raw or "ft" in raw or "feet" in raw:
        number *= 12.0
    return number if math.isfinite(number) else default


def to_decimal(text, default: float = 0.0) -> float:
    """Fraction or decimal text to a float: "1-1/4" → 1.25, "3/8\"" → 0.375."""
    if text is None:
        return default
    if isinstance(text, (int, float)):
        return float(text) if math.isfinite(text) else default
    clean = str(text).replace('"', "").strip()
    if not clean:
        return default

    m = _MIXED_RE.match(clean)
    if m:
        den = int(m.group(3))
        if den == 0:
            return default
        return int(m.group(1)) + int(m.group(2)) / den

    m = _FRACTION_RE.match(clean)
    if m:
        den = int(m.group(2))
        if den == 0:
            return default
        return int(m.group(1)) / den

    return parse_number(clean, default)


def thickness_to_decimal(text, default: float = 0.0) -> float:
    """Plate thickness text ("11 ga", "3/8\"", "0.5") to inches."""
    if text is None:
        return default
    key = str(text).lower().replace(" ", "")
    if key in GAUGE_TO_INCHES:
        return GAUGE_TO_INCHES[key]
    return to_decimal(text, default)


def format_fraction(value: float) -> str:
    """1.25 → '1-1/4"', 0.375 → '3/8"', 2.0 → '2"'. Falls back to the decimal."""
    whole = int(value)
    frac = value - whole
    if abs(frac) < 0.001:
        return '%d"' % whole
    for dec, label in _FRACTIONS:
        if abs(dec - frac) < 0.01:
            return '%d-%s"' % (whole, label) if whole > 0 else '%s"' % label
    return '%s"' % format_number(value)


def format_number(value: float) -> str:
    """Render a number the way the operator typed it: 48.0 → '48', 0.50 → '0.5'."""
    if float(value).is_integer():
        return str(int(value))
    return ("%.6f" % value).rstrip("0").rstrip(".")
