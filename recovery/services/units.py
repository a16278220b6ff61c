"""
Unit conversion between canonical metric storage and display units.

Everything persisted is kg / cm. Conversions to lbs / in happen only at the
edges, when reading user input or rendering values back.
"""

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54

WEIGHT_UNITS = ("kg", "lbs")
LENGTH_UNITS = ("cm", "in")

CANONICAL_WEIGHT_UNIT = "kg"
CANONICAL_LENGTH_UNIT = "cm"


def _check_unit(unit: str, allowed: tuple[str, ...]) -> None:
    if unit not in allowed:
        raise ValueError(f"Unknown unit '{unit}', expected one of {', '.join(allowed)}")


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a weight between kg and lbs. Same-unit conversion is exact."""
    _check_unit(from_unit, WEIGHT_UNITS)
    _check_unit(to_unit, WEIGHT_UNITS)

    if from_unit == to_unit:
        return value
    if from_unit == "kg":
        return value * LBS_PER_KG
    return value / LBS_PER_KG


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length between cm and in. Same-unit conversion is exact."""
    _check_unit(from_unit, LENGTH_UNITS)
    _check_unit(to_unit, LENGTH_UNITS)

    if from_unit == to_unit:
        return value
    if from_unit == "cm":
        return value / CM_PER_INCH
    return value * CM_PER_INCH


def format_weight(value: float, unit: str) -> str:
    """Render a weight for display, e.g. '65.0 kg'. Never store the result."""
    return f"{value:.1f} {unit}"


def format_length(value: float, unit: str) -> str:
    """Render a length for display, e.g. '80.5 cm'. Never store the result."""
    return f"{value:.1f} {unit}"


def to_canonical_weight(value: float | None, unit: str) -> float | None:
    if value is None:
        return None
    return convert_weight(value, unit, CANONICAL_WEIGHT_UNIT)


def from_canonical_weight(value: float | None, unit: str) -> float | None:
    if value is None:
        return None
    return convert_weight(value, CANONICAL_WEIGHT_UNIT, unit)


def to_canonical_length(value: float | None, unit: str) -> float | None:
    if value is None:
        return None
    return convert_length(value, unit, CANONICAL_LENGTH_UNIT)


def from_canonical_length(value: float | None, unit: str) -> float | None:
    if value is None:
        return None
    return convert_length(value, CANONICAL_LENGTH_UNIT, unit)
