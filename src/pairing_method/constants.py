"""
Pairing Method Constants and Enums

Centralized rule magnitudes, thresholds, reasoning strings and attribute names
so the rule set can be audited and unit-tested rule by rule.
"""

from enum import Enum


# =======================
# RULE ENUMS
# =======================

class Rule(str, Enum):
    """Additive scoring rules in evaluation order (the sweetness cap runs last)."""
    INTENSITY_HARMONY = "intensity_harmony"
    FAT_BALANCE = "fat_balance"
    ACID_GAP = "acid_gap"
    SPICE_LOGIC = "spice_logic"
    UMAMI_SUPPORT = "umami_support"
    FLAVOR_BRIDGE = "flavor_bridge"


class Reasoning(str, Enum):
    """Human-readable reasoning emitted when a rule fires."""
    BODY_ALIGNED = "Wine body aligns with protein intensity."
    BODY_MISALIGNED = "Wine body misaligned with dish intensity."
    STRUCTURE_BALANCES_RICHNESS = "Structure balances dish richness."
    LACKS_ACIDITY_FOR_RICHNESS = "Wine lacks acidity for rich texture."
    ACIDITY_TOO_LOW = "Wine acidity too low for dish brightness."
    ALCOHOL_CLASHES_WITH_SPICE = "High alcohol clashes with spice heat."
    TANNINS_AMPLIFIED_BY_SPICE = "Tannins amplified by spice."
    SWEETNESS_SOFTENS_SPICE = "Slight sweetness softens spice."
    ACIDITY_SUPPORTS_SAVORY = "Acidity supports savory depth."
    FLAVOR_BRIDGE = "Flavor bridge between wine and dish."
    SWEETNESS_TOO_LOW = "Wine sweetness lower than dish sweetness."


# =======================
# ATTRIBUTE NAME CONSTANTS
# =======================

class AttributeNames:
    """Record field names to avoid string hardcoding."""

    NAME = "name"

    # Food attributes
    PROTEIN_INTENSITY = "protein_intensity"
    FAT_LEVEL = "fat_level"
    SPICE_HEAT = "spice_heat"
    UMAMI = "umami"
    TEXTURE = "texture"
    TEXTURE_WEIGHT = "texture_weight"

    # Shared
    ACIDITY = "acidity"
    SWEETNESS = "sweetness"

    # Wine attributes
    BODY = "body"
    TANNIN = "tannin"
    ALCOHOL = "alcohol"
    AROMATIC_INTENSITY = "aromatic_intensity"
    FLAVOR_PROFILE = "flavor_profile"


# =======================
# SCALE CONSTANTS
# =======================

class ScaleRanges:
    """Valid ranges for structural attributes."""

    ATTRIBUTE_MIN = 0
    ATTRIBUTE_MAX = 5

    # Alcohol and aromatic intensity are never "absent"
    BOUNDED_MIN = 1
    BOUNDED_MAX = 5

    # Typical mid-scale values used when the raw value is unusable
    DEFAULT_ALCOHOL = 3
    DEFAULT_AROMATIC_INTENSITY = 2

    MIN_SCORE = 0
    MAX_SCORE = 100


# =======================
# RULE CONSTANTS
# =======================

class RuleConstants:
    """
    Scoring magnitudes and thresholds.

    Locked business values. Every rule in rules.py reads from here.
    """

    BASE_SCORE = 50
    TOP_N_RESULTS = 3

    # INTENSITY HARMONY
    # |protein_intensity - body| <= 1 is aligned, >= 3 is misaligned, 2 is neutral
    INTENSITY_ALIGNED_MAX_DIFF = 1
    INTENSITY_MISALIGNED_MIN_DIFF = 3
    INTENSITY_HARMONY_BONUS = 15
    INTENSITY_MISALIGNMENT_PENALTY = 15

    # FAT BALANCE
    RICH_FAT_LEVEL = 3
    VERY_RICH_FAT_LEVEL = 4
    STRUCTURE_MIN = 3          # wine acidity or tannin
    LOW_WINE_ACIDITY = 1
    FAT_BALANCE_BONUS = 10
    FAT_LACKS_ACIDITY_PENALTY = 10

    # ACID GAP
    ACID_GAP_TOLERANCE = 1
    ACID_GAP_PENALTY = 20

    # SPICE LOGIC
    SPICY_HEAT = 3
    HIGH_ALCOHOL = 4
    HIGH_TANNIN = 4
    SLIGHT_SWEETNESS = 1
    SPICE_ALCOHOL_PENALTY = 15
    SPICE_TANNIN_PENALTY = 10
    SPICE_SWEETNESS_BONUS = 8

    # UMAMI SUPPORT
    SAVORY_UMAMI = 3
    SUPPORTIVE_ACIDITY = 3
    UMAMI_SUPPORT_BONUS = 5

    # FLAVOR BRIDGE
    FLAVOR_BRIDGE_BONUS = 5

    # SWEETNESS
    # Cap applied after the [0, 100] clamp
    SWEETNESS_CAP = 40
