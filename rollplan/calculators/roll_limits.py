"""
Minimum rollable diameter for round sections (pipe, tube, solid bar).

Admin roll-limit rules win when one matches the OD and material category;
the smallest matching minimum is used. Otherwise the shop rule of thumb
applies: 8 × OD for steel and stainless, 12 × OD for aluminum.

Below the minimum, a mandrel die for the same OD may still make the part;
matching dies are listed so the estimator can decide.
"""

from typing import Optional, Sequence

from ..schemas import MandrelDie, RollLimitCheck, RollLimitRule

OD_MATCH_TOLERANCE = 0.01

DEFAULT_FACTORS = {
    "steel": 8.0,
    "stainless": 8.0,
    "aluminum": 12.0,
}


def is_stainless(grade: Optional[str]) -> bool:
    if not grade:
        return False
    g = grade.lower()
    return "s/s" in g or "stainless" in g or "304" in g or "316" in g


def is_aluminum(grade: Optional[str]) -> bool:
    if not grade:
        return False
    g = grade.lower()
    return any(k in g for k in ("alum", "6061", "5052", "6063", "3003"))


def material_category(grade: Optional[str]) -> str:
    """'stainless', 'aluminum' or 'steel' from a grade string like '304 S/S'."""
    if is_stainless(grade):
        return "stainless"
    if is_aluminum(grade):
        return "aluminum"
    return "steel"


def check_roll_limit(centerline_diameter: float, od: float, grade: Optional[str] = None,
                     rules: Sequence[RollLimitRule] = (),
                     mandrel_dies: Sequence[MandrelDie] = (),
                     factors: Optional[dict] = None) -> Optional[RollLimitCheck]:
    if centerline_diameter <= 0 or od <= 0:
        return None
    category = material_category(grade)

    matched = None
    for rule in rules:
        if abs(rule.od - od) >= OD_MATCH_TOLERANCE:
            continue
        if rule.material_category not in (category, "all"):
            continue
        if matched is None or rule.min_diameter < matched.min_diameter:
            matched = rule

    if matched is not None:
        min_dia = matched.min_diameter
    else:
        factor = (factors or DEFAULT_FACTORS).get(category, DEFAULT_FACTORS["steel"])
        min_dia = od * factor

    below = centerline_diameter < min_dia
    dies = []
    if below:
        dies = [
            d for d in mandrel_dies
            if abs(d.od - od) < OD_MATCH_TOLERANCE and d.min_diameter <= centerline_diameter
        ]

    return RollLimitCheck(
        centerline_diameter=centerline_diameter,
        min_roll_diameter=min_dia,
        is_below_min=below,
        material_category=category,
        matched_rule=matched,
        available_dies=dies,
    )
