"""
Rule-by-rule tests for the structural pairing rules.
"""

import pytest
from pairing_method.constants import Reasoning, Rule
from pairing_method.rules import (
    ADDITIVE_RULES,
    apply_acid_gap,
    apply_fat_balance,
    apply_flavor_bridge,
    apply_intensity_harmony,
    apply_spice_logic,
    apply_sweetness_rule,
    apply_umami_support,
    evaluate_additive_rules,
)
from pairing_method.schema import FoodAttributes, WineAttributes


def make_food(**overrides):
    attrs = dict(
        name="", protein_intensity=0, fat_level=0, acidity=0,
        sweetness=0, spice_heat=0, umami=0
    )
    attrs.update(overrides)
    return FoodAttributes(**attrs)


def make_wine(**overrides):
    attrs = dict(name="", body=0, tannin=0, acidity=0, sweetness=0, alcohol=3)
    attrs.update(overrides)
    return WineAttributes(**attrs)


class TestIntensityHarmony:
    """Wine body vs protein intensity."""

    @pytest.mark.parametrize("protein, body", [(5, 5), (4, 5), (3, 2), (0, 1)])
    def test_aligned_gives_bonus(self, protein, body):
        outcome = apply_intensity_harmony(make_food(protein_intensity=protein), make_wine(body=body))
        assert outcome.delta == 15
        assert outcome.reasoning == (Reasoning.BODY_ALIGNED.value,)

    @pytest.mark.parametrize("protein, body", [(5, 2), (0, 3), (1, 5), (5, 0)])
    def test_misaligned_gives_penalty(self, protein, body):
        outcome = apply_intensity_harmony(make_food(protein_intensity=protein), make_wine(body=body))
        assert outcome.delta == -15
        assert outcome.reasoning == ("Wine body misaligned with dish intensity.",)

    @pytest.mark.parametrize("protein, body", [(5, 3), (1, 3)])
    def test_difference_of_two_is_neutral(self, protein, body):
        outcome = apply_intensity_harmony(make_food(protein_intensity=protein), make_wine(body=body))
        assert outcome.delta == 0
        assert outcome.reasoning == ()


class TestFatBalance:
    """Rich dishes need acidity or tannin."""

    def test_acidity_balances_richness(self):
        outcome = apply_fat_balance(make_food(fat_level=3), make_wine(acidity=3))
        assert outcome.delta == 10
        assert outcome.reasoning == ("Structure balances dish richness.",)

    def test_tannin_balances_richness(self):
        outcome = apply_fat_balance(make_food(fat_level=5), make_wine(acidity=0, tannin=4))
        assert outcome.delta == 10

    def test_very_rich_dish_with_flat_wine_is_penalized(self):
        outcome = apply_fat_balance(make_food(fat_level=4), make_wine(acidity=1, tannin=2))
        assert outcome.delta == -10
        assert outcome.reasoning == ("Wine lacks acidity for rich texture.",)

    def test_structure_branch_checked_first(self):
        # acidity 1 would trigger the penalty, but tannin 3 supplies structure
        outcome = apply_fat_balance(make_food(fat_level=5), make_wine(acidity=1, tannin=3))
        assert outcome.delta == 10

    def test_moderately_rich_flat_wine_is_neutral(self):
        outcome = apply_fat_balance(make_food(fat_level=3), make_wine(acidity=1, tannin=0))
        assert outcome.delta == 0
        assert outcome.reasoning == ()

    def test_lean_dish_is_neutral(self):
        outcome = apply_fat_balance(make_food(fat_level=2), make_wine(acidity=5, tannin=5))
        assert outcome.delta == 0


class TestAcidGap:
    """Wine acidity must keep up with dish acidity."""

    def test_gap_of_two_is_penalized(self):
        outcome = apply_acid_gap(make_food(acidity=4), make_wine(acidity=2))
        assert outcome.delta == -20
        assert outcome.reasoning == ("Wine acidity too low for dish brightness.",)

    def test_gap_of_one_is_tolerated(self):
        outcome = apply_acid_gap(make_food(acidity=4), make_wine(acidity=3))
        assert outcome.delta == 0
        assert outcome.reasoning == ()

    def test_more_acidic_wine_is_fine(self):
        assert apply_acid_gap(make_food(acidity=2), make_wine(acidity=5)).delta == 0


class TestSpiceLogic:
    """Heat interactions accumulate."""

    def test_all_three_checks_fire_in_order(self):
        outcome = apply_spice_logic(
            make_food(spice_heat=4),
            make_wine(alcohol=5, tannin=5, sweetness=2)
        )
        assert outcome.delta == -17
        assert outcome.reasoning == (
            "High alcohol clashes with spice heat.",
            "Tannins amplified by spice.",
            "Slight sweetness softens spice.",
        )

    def test_alcohol_only(self):
        outcome = apply_spice_logic(make_food(spice_heat=3), make_wine(alcohol=4))
        assert outcome.delta == -15
        assert outcome.reasoning == (Reasoning.ALCOHOL_CLASHES_WITH_SPICE.value,)

    def test_tannin_only(self):
        outcome = apply_spice_logic(make_food(spice_heat=3), make_wine(alcohol=3, tannin=4))
        assert outcome.delta == -10
        assert outcome.reasoning == (Reasoning.TANNINS_AMPLIFIED_BY_SPICE.value,)

    def test_sweetness_only(self):
        outcome = apply_spice_logic(make_food(spice_heat=5), make_wine(alcohol=2, sweetness=1))
        assert outcome.delta == 8
        assert outcome.reasoning == (Reasoning.SWEETNESS_SOFTENS_SPICE.value,)

    def test_alcohol_and_sweetness(self):
        outcome = apply_spice_logic(make_food(spice_heat=3), make_wine(alcohol=4, sweetness=3))
        assert outcome.delta == -7
        assert len(outcome.reasoning) == 2

    def test_mild_dish_ignores_wine(self):
        outcome = apply_spice_logic(
            make_food(spice_heat=2),
            make_wine(alcohol=5, tannin=5, sweetness=5)
        )
        assert outcome.delta == 0
        assert outcome.reasoning == ()


class TestUmamiSupport:
    """Acidity supports savory depth."""

    def test_savory_dish_with_acidic_wine(self):
        outcome = apply_umami_support(make_food(umami=3), make_wine(acidity=3))
        assert outcome.delta == 5
        assert outcome.reasoning == ("Acidity supports savory depth.",)

    def test_low_acidity_wine(self):
        assert apply_umami_support(make_food(umami=5), make_wine(acidity=2)).delta == 0

    def test_low_umami_dish(self):
        assert apply_umami_support(make_food(umami=2), make_wine(acidity=5)).delta == 0


class TestFlavorBridge:
    """Dish name mentions a wine flavor note."""

    def test_case_insensitive_substring_match(self):
        outcome = apply_flavor_bridge(
            make_food(name="Lemon Chicken"),
            make_wine(flavor_profile=("Grass", "LEMON"))
        )
        assert outcome.delta == 5
        assert outcome.reasoning == ("Flavor bridge between wine and dish.",)

    def test_note_inside_a_word_matches(self):
        outcome = apply_flavor_bridge(make_food(name="Cherrywood Ribs"), make_wine(flavor_profile=("cherry",)))
        assert outcome.delta == 5

    def test_no_match(self):
        outcome = apply_flavor_bridge(make_food(name="Ribeye Steak"), make_wine(flavor_profile=("cedar", "tobacco")))
        assert outcome.delta == 0
        assert outcome.reasoning == ()

    def test_empty_profile_never_matches(self):
        assert apply_flavor_bridge(make_food(name="Anything"), make_wine()).delta == 0

    def test_bonus_applied_once_for_several_matches(self):
        outcome = apply_flavor_bridge(
            make_food(name="Cherry Tomato Salad"),
            make_wine(flavor_profile=("cherry", "tomato"))
        )
        assert outcome.delta == 5
        assert len(outcome.reasoning) == 1


class TestSweetnessRule:
    """Wine at least as sweet as the dish, else cap."""

    def test_drier_wine_is_capped(self):
        outcome = apply_sweetness_rule(make_food(sweetness=3), make_wine(sweetness=1))
        assert outcome.cap == 40
        assert outcome.reasoning == ("Wine sweetness lower than dish sweetness.",)

    def test_equal_sweetness_is_fine(self):
        outcome = apply_sweetness_rule(make_food(sweetness=2), make_wine(sweetness=2))
        assert outcome.cap is None
        assert outcome.reasoning == ()

    def test_sweeter_wine_is_fine(self):
        assert apply_sweetness_rule(make_food(sweetness=0), make_wine(sweetness=4)).cap is None


class TestRuleTable:
    """Additive rule ordering."""

    def test_evaluation_order(self):
        assert [rule for rule, _ in ADDITIVE_RULES] == [
            Rule.INTENSITY_HARMONY,
            Rule.FAT_BALANCE,
            Rule.ACID_GAP,
            Rule.SPICE_LOGIC,
            Rule.UMAMI_SUPPORT,
            Rule.FLAVOR_BRIDGE,
        ]

    def test_evaluate_additive_rules_keeps_order(self):
        outcomes = evaluate_additive_rules(make_food(protein_intensity=2), make_wine(body=2))
        assert list(outcomes) == [rule for rule, _ in ADDITIVE_RULES]
        assert outcomes[Rule.INTENSITY_HARMONY].delta == 15
        assert outcomes[Rule.ACID_GAP].delta == 0

    def test_rules_are_pure(self):
        food = make_food(spice_heat=4, fat_level=4, umami=3)
        wine = make_wine(alcohol=5, tannin=5, acidity=3)
        assert evaluate_additive_rules(food, wine) == evaluate_additive_rules(food, wine)
