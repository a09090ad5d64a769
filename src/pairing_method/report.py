"""
Tabular reports over the pairing engine.

Batch views used by the CLI and for eyeballing a dataset: ranked results as a
DataFrame, a full dish x wine score matrix, and a smoke check over named
dishes.
"""

from typing import Any, Dict, List, Sequence

import pandas as pd

from pairing_method.constants import AttributeNames
from pairing_method.engine import calculate_pairing, score_pairing
from pairing_method.error_handling import DataValidationError
from pairing_method.schema import PairingResult
from pairing_method.utils import get_field, logger

RESULT_COLUMNS = ["rank", "name", "score", "reasoning"]


def _record_name(record: Any) -> str:
    name = get_field(record, AttributeNames.NAME)
    return name if isinstance(name, str) else ""


def results_to_dataframe(results: Sequence[PairingResult]) -> pd.DataFrame:
    """
    Ranked results as a DataFrame.

    Returns:
        DataFrame with rank (1-based), name, score, reasoning (joined with spaces)
    """
    rows = [
        {
            "rank": rank,
            "name": result.name,
            "score": result.score,
            "reasoning": " ".join(result.reasoning)
        }
        for rank, result in enumerate(results, start=1)
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def pairing_matrix(foods: Sequence[Any], wines: Sequence[Any]) -> pd.DataFrame:
    """
    Score every dish against every wine (no top-N truncation).

    Returns:
        DataFrame indexed by food name, one column per wine name, int scores
    """
    scores = [[score_pairing(food, wine).score for wine in wines] for food in foods]

    matrix = pd.DataFrame(
        scores,
        index=pd.Index([_record_name(food) for food in foods], name="food"),
        columns=[_record_name(wine) for wine in wines],
        dtype=int
    )

    logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} pairing matrix")
    return matrix


def smoke_check(
    foods: Sequence[Any],
    wines: Sequence[Any],
    dish_names: Sequence[str]
) -> Dict[str, List[PairingResult]]:
    """
    Rank wines for each named dish.

    Args:
        foods: Food records
        wines: Wine records
        dish_names: Dishes that must exist in foods

    Returns:
        {dish name: top results}

    Raises:
        DataValidationError: If a named dish is missing from foods
    """
    by_name = {}
    for food in foods:
        by_name.setdefault(_record_name(food), food)

    missing = [name for name in dish_names if name not in by_name]
    if missing:
        raise DataValidationError(f"Missing test foods in dataset: {', '.join(missing)}")

    report = {}
    for name in dish_names:
        results = calculate_pairing(by_name[name], wines)
        if not results:
            logger.warning(f"No pairings for {name!r}")
        report[name] = results

    return report


__all__ = [
    'results_to_dataframe',
    'pairing_matrix',
    'smoke_check'
]
