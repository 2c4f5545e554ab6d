from decimal import Decimal
import enum

from utils.exceptions import InvalidDimension

MM_PER_FOOT = Decimal("304.8")
INCHES_PER_FOOT = Decimal("12")


class DimensionUnit(str, enum.Enum):
    FT = "ft"
    MM = "mm"
    INCH = "inch"


_FEET_DIVISOR = {
    DimensionUnit.FT: Decimal(1),
    DimensionUnit.MM: MM_PER_FOOT,
    DimensionUnit.INCH: INCHES_PER_FOOT,
}


def as_decimal(value) -> Decimal:
    """Convert ints, floats and numeric strings to Decimal without binary float drift."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_canonical(value, unit) -> Decimal:
    """
    Convert a tile dimension to feet, the unit every area and price is computed in.

    Args:
        value: The length as entered (must be positive).
        unit: A DimensionUnit or one of "ft", "mm", "inch".

    Raises:
        InvalidDimension: for non-positive values or unsupported units.
    """
    try:
        unit = DimensionUnit(unit)
    except ValueError:
        raise InvalidDimension(f"Unsupported dimension unit '{unit}'. Use one of: ft, mm, inch.")

    value = as_decimal(value)
    if value <= 0:
        raise InvalidDimension(f"Tile dimension must be positive, got {value} {unit.value}.")
    return value / _FEET_DIVISOR[unit]


def area_per_box(width_ft, height_ft, tiles_per_box) -> Decimal:
    """Square feet covered by one box of tiles."""
    width_ft = as_decimal(width_ft)
    height_ft = as_decimal(height_ft)
    if width_ft <= 0 or height_ft <= 0:
        raise InvalidDimension(f"Tile width and height must be positive, got {width_ft} x {height_ft} ft.")
    if isinstance(tiles_per_box, bool) or int(tiles_per_box) != tiles_per_box or tiles_per_box <= 0:
        raise InvalidDimension(f"Tiles per box must be a positive whole number, got {tiles_per_box}.")
    return width_ft * height_ft * int(tiles_per_box)
