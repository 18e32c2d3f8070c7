"""
Section size catalog with fallback chain:
1. Override sizes from a JSON file (admin section-size settings export)
2. DEFAULT sizes from this file

Returns the section size that faces the rolls (offset dimension) and the
default stick length for a profile type + size label. Shapes that are
fully described by their label (angle, beam, channel, tee, flat bar,
plate thickness) are parsed instead of listed.

Override file format:
    {"pipe": [{"label": "5\\" Pipe", "od": 5.563, "kind": "pipe",
               "nominal": "5\\"", "default_length": "21'"}]}
"""

import json
import logging
import re
from typing import Dict, List, Optional

from ..schemas import CatalogEntry, ProfileType
from ..units import parse_length_inches, thickness_to_decimal, to_decimal

logger = logging.getLogger(__name__)

# Default stick lengths by profile (plate is bought to size)
DEFAULT_STOCK_LENGTHS = {
    ProfileType.ANGLE: "20'",
    ProfileType.BEAM: "20'",
    ProfileType.CHANNEL: "20'",
    ProfileType.FLAT_BAR: "20'",
    ProfileType.TEE_BAR: "20'",
    ProfileType.PIPE: "20'",
}

# Round sections — OD faces the rolls
ROUND_SECTIONS = [
    # Round tube
    {"label": '.625" OD Tube', "od": 0.625, "kind": "tube", "default_length": "20'"},
    {"label": '.75" OD Tube', "od": 0.75, "kind": "tube", "default_length": "20'"},
    {"label": '1" OD Tube', "od": 1.0, "kind": "tube", "default_length": "20'"},
    {"label": '1.25" OD Tube', "od": 1.25, "kind": "tube", "default_length": "20'"},
    {"label": '1.5" OD Tube', "od": 1.5, "kind": "tube", "default_length": "20'"},
    {"label": '2" OD Tube', "od": 2.0, "kind": "tube", "default_length": "20'"},
    {"label": '3" OD Tube', "od": 3.0, "kind": "tube", "default_length": "20'"},
    {"label": '4" OD Tube', "od": 4.0, "kind": "tube", "default_length": "20'"},
    # Pipe — nominal size, actual OD
    {"label": '1" Pipe', "nominal": '1"', "od": 1.315, "kind": "pipe", "default_length": "21'"},
    {"label": '1.25" Pipe', "nominal": '1-1/4"', "od": 1.660, "kind": "pipe", "default_length": "21'"},
    {"label": '1.5" Pipe', "nominal": '1-1/2"', "od": 1.900, "kind": "pipe", "default_length": "21'"},
    {"label": '2" Pipe', "nominal": '2"', "od": 2.375, "kind": "pipe", "default_length": "21'"},
    {"label": '3" Pipe', "nominal": '3"', "od": 3.500, "kind": "pipe", "default_length": "21'"},
    {"label": '4" Pipe', "nominal": '4"', "od": 4.500, "kind": "pipe", "default_length": "21'"},
    # Solid round bar
    {"label": '.500" Solid Round', "od": 0.500, "kind": "solid_bar", "default_length": "20'"},
    {"label": '.625" Solid Round', "od": 0.625, "kind": "solid_bar", "default_length": "20'"},
    {"label": '.750" Solid Round', "od": 0.750, "kind": "solid_bar", "default_length": "20'"},
    {"label": '.875" Solid Round', "od": 0.875, "kind": "solid_bar", "default_length": "20'"},
    {"label": '1" Solid Round', "od": 1.0, "kind": "solid_bar", "default_length": "20'"},
    {"label": '1.25" Solid Round', "od": 1.25, "kind": "solid_bar", "default_length": "20'"},
    {"label": '1.5" Solid Round', "od": 1.5, "kind": "solid_bar", "default_length": "20'"},
    {"label": '1.75" Solid Round', "od": 1.75, "kind": "solid_bar", "default_length": "20'"},
    {"label": '2" Solid Round', "od": 2.0, "kind": "solid_bar", "default_length": "20'"},
    {"label": '2.5" Solid Round', "od": 2.5, "kind": "solid_bar", "default_length": "20'"},
    {"label": '3" Solid Round', "od": 3.0, "kind": "solid_bar", "default_length": "20'"},
    {"label": '3.5" Solid Round', "od": 3.5, "kind": "solid_bar", "default_length": "20'"},
    {"label": '4" Solid Round', "od": 4.0, "kind": "solid_bar", "default_length": "20'"},
]

# Pipe schedule wall thickness (inches) by nominal size
PIPE_SCHEDULES = {
    '1"':     {"5": 0.065, "10": 0.109, "40": 0.133, "80": 0.179, "160": 0.250},
    '1-1/4"': {"5": 0.065, "10": 0.109, "40": 0.140, "80": 0.191, "160": 0.250},
    '1-1/2"': {"5": 0.065, "10": 0.109, "40": 0.145, "80": 0.200, "160": 0.281},
    '2"':     {"5": 0.065, "10": 0.109, "40": 0.154, "80": 0.218, "160": 0.344},
    '3"':     {"5": 0.083, "10": 0.120, "40": 0.216, "80": 0.300, "160": 0.438},
    '4"':     {"5": 0.083, "10": 0.120, "40": 0.237, "80": 0.337, "160": 0.531},
}

_BEAM_RE = re.compile(r"^[WS](\d+(?:\.\d+)?)", re.IGNORECASE)
_CHANNEL_RE = re.compile(r"^(?:MC|C)(\d+(?:\.\d+)?)", re.IGNORECASE)
_TEE_RE = re.compile(r"^(?:WT|ST)(\d+(?:\.\d+)?)", re.IGNORECASE)


# --- Label parsers ---

def parse_angle_size(label: Optional[str]) -> Optional[Dict[str, float]]:
    """'3x4' → {'leg1': 3.0, 'leg2': 4.0}"""
    if not label or label == "Custom":
        return None
    parts = label.lower().replace('"', "").split("x")
    if len(parts) != 2:
        return None
    legs = [to_decimal(p.strip(), default=-1.0) for p in parts]
    if legs[0] <= 0 or legs[1] <= 0:
        return None
    return {"leg1": legs[0], "leg2": legs[1]}


def parse_flat_bar_size(label: Optional[str]) -> Optional[Dict[str, float]]:
    """'2 x 1/4' → {'width': 2.0, 'thickness': 0.25}"""
    if not label or label == "Custom":
        return None
    parts = label.lower().replace('"', "").split("x")
    if len(parts) != 2:
        return None
    width = to_decimal(parts[0].strip())
    thickness = to_decimal(parts[1].strip())
    if width > 0 and thickness > 0:
        return {"width": width, "thickness": thickness}
    return None


def _depth(pattern, label: Optional[str]) -> Optional[float]:
    if not label or label == "Custom":
        return None
    m = pattern.match(label.strip())
    if m:
        return float(m.group(1))
    return None


def parse_beam_depth(label: Optional[str]) -> Optional[float]:
    """'W12x26' → 12.0, 'S8x18.4' → 8.0"""
    return _depth(_BEAM_RE, label)


def parse_channel_depth(label: Optional[str]) -> Optional[float]:
    """'C6x8.2' → 6.0, 'MC8x8.5' → 8.0"""
    return _depth(_CHANNEL_RE, label)


def parse_tee_depth(label: Optional[str]) -> Optional[float]:
    """'WT4x15.5' → 4.0"""
    return _depth(_TEE_RE, label)


# --- Override file ---

def load_section_overrides(path: Optional[str]) -> Dict[str, List[dict]]:
    """Read override sizes; an empty or unreadable path means defaults only."""
    if not path:
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load section sizes from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Section size file %s is not an object — ignoring", path)
        return {}
    logger.info("Loaded section size overrides for %d profile types from %s", len(data), path)
    return data


class SectionCatalog:
    """
    Looks up section sizes.
    Priority: 1) override sizes passed in or loaded from overrides_path
              2) ROUND_SECTIONS + label parsing in this file

    Read-only once built. Calculators never hold one; profile callers query
    it before handing an offset dimension to the engine.
    """

    def __init__(self, overrides: Optional[Dict[str, List[dict]]] = None,
                 overrides_path: Optional[str] = None):
        self._overrides = dict(overrides or load_section_overrides(overrides_path))

    def _round_sections(self) -> List[dict]:
        return self._overrides.get(ProfileType.PIPE.value) or ROUND_SECTIONS

    def sizes(self, profile_type: ProfileType) -> List[str]:
        """Selectable size labels for a profile type."""
        if profile_type == ProfileType.PIPE:
            return [s["label"] for s in self._round_sections()]
        return [s["label"] for s in self._overrides.get(profile_type.value, [])]

    def lookup(self, profile_type: ProfileType, label: Optional[str]) -> Optional[CatalogEntry]:
        """CatalogEntry for a size label, or None when the label isn't recognized."""
        if not label:
            return None
        default_length = DEFAULT_STOCK_LENGTHS.get(profile_type)

        for entry in self._overrides.get(profile_type.value, []):
            if entry.get("label") == label:
                return self._entry(profile_type, entry, default_length)
        if profile_type == ProfileType.PIPE:
            for entry in ROUND_SECTIONS:
                if entry["label"] == label:
                    return self._entry(profile_type, entry, default_length)
            return None

        offset = None
        if profile_type == ProfileType.ANGLE:
            legs = parse_angle_size(label)
            offset = max(legs["leg1"], legs["leg2"]) if legs else None
        elif profile_type == ProfileType.BEAM:
            offset = parse_beam_depth(label)
        elif profile_type == ProfileType.CHANNEL:
            offset = parse_channel_depth(label)
        elif profile_type == ProfileType.TEE_BAR:
            offset = parse_tee_depth(label)
        elif profile_type == ProfileType.FLAT_BAR:
            bar = parse_flat_bar_size(label)
            offset = bar["thickness"] if bar else None
        elif profile_type == ProfileType.PLATE:
            thickness = thickness_to_decimal(label)
            offset = thickness if thickness > 0 else None

        if offset is None:
            return None
        return CatalogEntry(
            profile_type=profile_type,
            label=label,
            offset_dimension=offset,
            default_stock_length=parse_length_inches(default_length) if default_length else None,
        )

    def require(self, profile_type: ProfileType, label: str) -> CatalogEntry:
        """Same as lookup, but raises ValueError for an unknown size."""
        entry = self.lookup(profile_type, label)
        if entry is None:
            raise ValueError(
                f"Unknown {profile_type.value} size: {label!r}. "
                f"Available: {self.sizes(profile_type)}"
            )
        return entry

    def wall_thickness(self, nominal: str, schedule: str) -> float:
        """Pipe wall for a nominal size and schedule, 0.0 if unknown."""
        return PIPE_SCHEDULES.get(nominal, {}).get(str(schedule), 0.0)

    @staticmethod
    def _entry(profile_type: ProfileType, entry: dict,
               default_length: Optional[str]) -> CatalogEntry:
        length = entry.get("default_length", default_length)
        offset = entry.get("od", entry.get("offset_dimension", 0.0))
        return CatalogEntry(
            profile_type=profile_type,
            label=entry["label"],
            offset_dimension=float(offset),
            default_stock_length=parse_length_inches(length) if length else None,
            kind=entry.get("kind"),
            nominal=entry.get("nominal"),
        )
