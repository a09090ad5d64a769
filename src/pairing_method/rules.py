"""
Structural pairing rules.

Each rule is a pure function of (FoodAttributes, WineAttributes). Additive
rules return a RuleOutcome; the sweetness rule returns a CapOutcome and is
applied after clamping.

Rule order (reasoning is reported in this order):
1. Intensity Harmony  - wine body vs protein intensity
2. Fat Balance        - rich dishes need acidity or tannin
3. Acid Gap           - wine acidity must keep up with the dish
4. Spice Logic        - alcohol and tannin clash with heat, sweetness helps
5. Umami Support      - acidity lifts savory depth
6. Flavor Bridge      - dish name mentions a wine flavor note
7. Sweetness          - wine at least as sweet as the dish, else cap at 40
"""

from typing import Callable, Dict, Tuple

from pairing_method.constants import Reasoning, Rule, RuleConstants as RC
from pairing_method.schema import CapOutcome, FoodAttributes, RuleOutcome, WineAttributes

_NO_CHANGE = RuleOutcome()


def apply_intensity_harmony(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    """Bonus when body tracks protein intensity, penalty when far apart.

    A difference of exactly 2 is neutral.
    """
    diff = abs(food.protein_intensity - wine.body)

    if diff <= RC.INTENSITY_ALIGNED_MAX_DIFF:
        return RuleOutcome(delta=RC.INTENSITY_HARMONY_BONUS, reasoning=(Reasoning.BODY_ALIGNED.value,))
    if diff >= RC.INTENSITY_MISALIGNED_MIN_DIFF:
        return RuleOutcome(delta=-RC.INTENSITY_MISALIGNMENT_PENALTY, reasoning=(Reasoning.BODY_MISALIGNED.value,))
    return _NO_CHANGE


def apply_fat_balance(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    """Rich dishes want structure; very rich ones punish flat wines."""
    if food.fat_level >= RC.RICH_FAT_LEVEL and (
        wine.acidity >= RC.STRUCTURE_MIN or wine.tannin >= RC.STRUCTURE_MIN
    ):
        return RuleOutcome(
            delta=RC.FAT_BALANCE_BONUS,
            reasoning=(Reasoning.STRUCTURE_BALANCES_RICHNESS.value,)
        )

    if food.fat_level >= RC.VERY_RICH_FAT_LEVEL and wine.acidity <= RC.LOW_WINE_ACIDITY:
        return RuleOutcome(
            delta=-RC.FAT_LACKS_ACIDITY_PENALTY,
            reasoning=(Reasoning.LACKS_ACIDITY_FOR_RICHNESS.value,)
        )

    return _NO_CHANGE


def apply_acid_gap(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    if wine.acidity + RC.ACID_GAP_TOLERANCE < food.acidity:
        return RuleOutcome(delta=-RC.ACID_GAP_PENALTY, reasoning=(Reasoning.ACIDITY_TOO_LOW.value,))
    return _NO_CHANGE


def apply_spice_logic(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    """
    Heat interactions. The three checks are independent and accumulate.

    Returns:
        RuleOutcome with the net delta and one message per check that fired
    """
    if food.spice_heat < RC.SPICY_HEAT:
        return _NO_CHANGE

    checks = (
        (wine.alcohol >= RC.HIGH_ALCOHOL, -RC.SPICE_ALCOHOL_PENALTY, Reasoning.ALCOHOL_CLASHES_WITH_SPICE),
        (wine.tannin >= RC.HIGH_TANNIN, -RC.SPICE_TANNIN_PENALTY, Reasoning.TANNINS_AMPLIFIED_BY_SPICE),
        (wine.sweetness >= RC.SLIGHT_SWEETNESS, RC.SPICE_SWEETNESS_BONUS, Reasoning.SWEETNESS_SOFTENS_SPICE),
    )
    fired = [(delta, message.value) for triggered, delta, message in checks if triggered]

    return RuleOutcome(
        delta=sum(delta for delta, _ in fired),
        reasoning=tuple(message for _, message in fired)
    )


def apply_umami_support(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    if food.umami >= RC.SAVORY_UMAMI and wine.acidity >= RC.SUPPORTIVE_ACIDITY:
        return RuleOutcome(delta=RC.UMAMI_SUPPORT_BONUS, reasoning=(Reasoning.ACIDITY_SUPPORTS_SAVORY.value,))
    return _NO_CHANGE


def apply_flavor_bridge(food: FoodAttributes, wine: WineAttributes) -> RuleOutcome:
    """Case-insensitive keyword match: dish name contains a wine flavor note."""
    food_name = food.name.lower()
    if any(note.lower() in food_name for note in wine.flavor_profile):
        return RuleOutcome(delta=RC.FLAVOR_BRIDGE_BONUS, reasoning=(Reasoning.FLAVOR_BRIDGE.value,))
    return _NO_CHANGE


def apply_sweetness_rule(food: FoodAttributes, wine: WineAttributes) -> CapOutcome:
    """Wine sweetness must meet or exceed dish sweetness, otherwise cap the score."""
    if wine.sweetness < food.sweetness:
        return CapOutcome(cap=RC.SWEETNESS_CAP, reasoning=(Reasoning.SWEETNESS_TOO_LOW.value,))
    return CapOutcome()


# Additive rules in evaluation order. The sweetness cap runs separately, last.
ADDITIVE_RULES: Tuple[Tuple[Rule, Callable[[FoodAttributes, WineAttributes], RuleOutcome]], ...] = (
    (Rule.INTENSITY_HARMONY, apply_intensity_harmony),
    (Rule.FAT_BALANCE, apply_fat_balance),
    (Rule.ACID_GAP, apply_acid_gap),
    (Rule.SPICE_LOGIC, apply_spice_logic),
    (Rule.UMAMI_SUPPORT, apply_umami_support),
    (Rule.FLAVOR_BRIDGE, apply_flavor_bridge),
)


def evaluate_additive_rules(food: FoodAttributes, wine: WineAttributes) -> Dict[Rule, RuleOutcome]:
    """Run every additive rule; the returned dict preserves evaluation order."""
    return {rule: evaluate(food, wine) for rule, evaluate in ADDITIVE_RULES}


__all__ = [
    'apply_intensity_harmony',
    'apply_fat_balance',
    'apply_acid_gap',
    'apply_spice_logic',
    'apply_umami_support',
    'apply_flavor_bridge',
    'apply_sweetness_rule',
    'ADDITIVE_RULES',
    'evaluate_additive_rules'
]
