"""
Pairing Engine: deterministic structural food/wine scoring.

Pipeline per wine:
1. Normalize raw food and wine records onto the integer scales
2. Start from the base score and add the deltas of the additive rules
3. Clamp to [0, 100]
4. Apply the sweetness cap last (it can only lower the score)

calculate_pairing ranks every wine this way and keeps the top three.
Same inputs always produce the same outputs.
"""

from typing import Any, List

from pairing_method.constants import AttributeNames, RuleConstants, ScaleRanges
from pairing_method.normalizer import normalize_food, normalize_wine
from pairing_method.rules import apply_sweetness_rule, evaluate_additive_rules
from pairing_method.schema import PairingResult
from pairing_method.utils import get_field, is_record_sequence, logger


def _score_one_pair(food: Any, wine: Any) -> PairingResult:
    """Score one (food, wine) pair and build its reasoning."""
    f = normalize_food(food)
    w = normalize_wine(wine)

    outcomes = evaluate_additive_rules(f, w).values()
    score = RuleConstants.BASE_SCORE + sum(outcome.delta for outcome in outcomes)
    score = max(ScaleRanges.MIN_SCORE, min(ScaleRanges.MAX_SCORE, score))

    sweetness = apply_sweetness_rule(f, w)
    if sweetness.cap is not None:
        score = min(score, sweetness.cap)

    reasoning = sum((outcome.reasoning for outcome in outcomes), ()) + sweetness.reasoning

    raw_name = get_field(wine, AttributeNames.NAME)
    name = w.name or (raw_name if isinstance(raw_name, str) else "")

    return PairingResult(name=name, score=score, reasoning=reasoning)


def score_pairing(food: Any, wine: Any) -> PairingResult:
    """
    Score a single (food, wine) pair.

    Args:
        food: Food record (dict or object with the structural attributes)
        wine: Wine record

    Returns:
        PairingResult; a zero-score, empty-reasoning result if either is None
    """
    if food is None or wine is None:
        return PairingResult()
    return _score_one_pair(food, wine)


def calculate_pairing(food: Any, wines: Any) -> List[PairingResult]:
    """
    Rank wines for a dish and return the best matches.

    Sorting is stable: wines with equal scores keep their input order.

    Args:
        food: Food record
        wines: List of wine records

    Returns:
        Top results sorted by score descending (at most three), or an
        empty list when food is missing or wines is empty / not a list
    """
    if food is None or not is_record_sequence(wines) or len(wines) == 0:
        return []

    results = [_score_one_pair(food, wine) for wine in wines]
    results.sort(key=lambda result: result.score, reverse=True)

    logger.debug(f"Scored {len(results)} wines for {get_field(food, AttributeNames.NAME)!r}")

    return results[:RuleConstants.TOP_N_RESULTS]


__all__ = [
    'score_pairing',
    'calculate_pairing'
]
