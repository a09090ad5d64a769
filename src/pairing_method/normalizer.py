"""
Attribute normalization.

Turns untrusted food/wine records into FoodAttributes / WineAttributes.
Never raises: missing or malformed fields degrade to safe defaults.
"""

import math
from typing import Any, Optional

from pairing_method.constants import AttributeNames, ScaleRanges
from pairing_method.schema import FoodAttributes, WineAttributes
from pairing_method.utils import get_field, is_record_sequence


def _to_number(value: Any) -> Optional[float]:
    """Coerce to float, or None when the value isn't numeric (NaN included)."""
    try:
        number = float(value)
    except OverflowError:
        # ints too large for a float
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def clamp_to_integer_range(
    value: Any,
    min_value: int = ScaleRanges.ATTRIBUTE_MIN,
    max_value: int = ScaleRanges.ATTRIBUTE_MAX,
    default: Optional[int] = None
) -> int:
    """
    Floor a value to an integer and clamp it into [min_value, max_value].

    Args:
        value: Raw attribute value (number, numeric string, bool, None, ...)
        min_value: Lower bound of the scale
        max_value: Upper bound of the scale
        default: Returned when the value isn't numeric (defaults to min_value)

    Returns:
        Integer within [min_value, max_value]
    """
    number = _to_number(value)
    if number is None:
        return min_value if default is None else default

    if math.isinf(number):
        return max_value if number > 0 else min_value

    return max(min_value, min(max_value, math.floor(number)))


def _display_name(record: Any) -> str:
    name = get_field(record, AttributeNames.NAME)
    return name if isinstance(name, str) else ""


def normalize_food(food: Any) -> FoodAttributes:
    """
    Normalize a raw food record for scoring.

    Accepts both "texture" and "texture_weight"; "texture" wins when both
    are present.
    """
    texture = get_field(food, AttributeNames.TEXTURE)
    if texture is None:
        texture = get_field(food, AttributeNames.TEXTURE_WEIGHT)

    return FoodAttributes(
        name=_display_name(food),
        protein_intensity=clamp_to_integer_range(get_field(food, AttributeNames.PROTEIN_INTENSITY)),
        fat_level=clamp_to_integer_range(get_field(food, AttributeNames.FAT_LEVEL)),
        acidity=clamp_to_integer_range(get_field(food, AttributeNames.ACIDITY)),
        sweetness=clamp_to_integer_range(get_field(food, AttributeNames.SWEETNESS)),
        spice_heat=clamp_to_integer_range(get_field(food, AttributeNames.SPICE_HEAT)),
        umami=clamp_to_integer_range(get_field(food, AttributeNames.UMAMI)),
        texture_weight=clamp_to_integer_range(texture),
    )


def normalize_wine(wine: Any) -> WineAttributes:
    """
    Normalize a raw wine record for scoring.

    body, tannin, acidity, sweetness land on 0-5; alcohol and
    aromatic_intensity on 1-5 with mid-scale defaults (3 and 2) when unusable.
    Non-string flavor notes are dropped.
    """
    raw_profile = get_field(wine, AttributeNames.FLAVOR_PROFILE)
    if is_record_sequence(raw_profile):
        flavor_profile = tuple(note for note in raw_profile if isinstance(note, str))
    else:
        flavor_profile = ()

    return WineAttributes(
        name=_display_name(wine),
        body=clamp_to_integer_range(get_field(wine, AttributeNames.BODY)),
        tannin=clamp_to_integer_range(get_field(wine, AttributeNames.TANNIN)),
        acidity=clamp_to_integer_range(get_field(wine, AttributeNames.ACIDITY)),
        sweetness=clamp_to_integer_range(get_field(wine, AttributeNames.SWEETNESS)),
        alcohol=clamp_to_integer_range(
            get_field(wine, AttributeNames.ALCOHOL),
            ScaleRanges.BOUNDED_MIN,
            ScaleRanges.BOUNDED_MAX,
            default=ScaleRanges.DEFAULT_ALCOHOL
        ),
        aromatic_intensity=clamp_to_integer_range(
            get_field(wine, AttributeNames.AROMATIC_INTENSITY),
            ScaleRanges.BOUNDED_MIN,
            ScaleRanges.BOUNDED_MAX,
            default=ScaleRanges.DEFAULT_AROMATIC_INTENSITY
        ),
        flavor_profile=flavor_profile,
    )
