"""
PairingSession: dish lookup on top of a loaded dataset.

Holds the food and wine collections, resolves a selected dish by name and
hands it to the engine.
"""

from typing import Any, List, Optional, Sequence

from pairing_method.constants import AttributeNames
from pairing_method.data_loader import PathLike, load_data
from pairing_method.engine import calculate_pairing
from pairing_method.error_handling import DishNotFoundError, DishSelectionError
from pairing_method.schema import PairingResult
from pairing_method.utils import get_field, logger


class PairingSession:
    """
    Loaded foods and wines plus the select-a-dish flow.

    Example:
        session = PairingSession.from_files()
        for result in session.recommend("Ribeye Steak"):
            print(result.name, result.score)
    """

    def __init__(self, foods: Sequence[Any], wines: Sequence[Any]):
        """
        Args:
            foods: Food records, in dataset order
            wines: Wine records, in dataset order
        """
        self.foods = list(foods)
        self.wines = list(wines)

    @classmethod
    def from_files(
        cls,
        foods_path: Optional[PathLike] = None,
        wines_path: Optional[PathLike] = None
    ) -> 'PairingSession':
        """Load both collections from disk (see data_loader.load_data)."""
        foods, wines = load_data(foods_path, wines_path)
        return cls(foods, wines)

    def food_names(self) -> List[str]:
        """Dish names in dataset order, skipping records without a name."""
        names = [get_field(food, AttributeNames.NAME) for food in self.foods]
        return [name for name in names if isinstance(name, str) and name]

    def find_food(self, name: str) -> Optional[Any]:
        """First food whose name matches exactly, or None."""
        for food in self.foods:
            if get_field(food, AttributeNames.NAME) == name:
                return food
        return None

    def recommend(self, food_name: Optional[str]) -> List[PairingResult]:
        """
        Top wine pairings for a dish selected by name.

        Raises:
            DishSelectionError: If no dish name was given
            DishNotFoundError: If the dish isn't in the dataset
        """
        if not food_name or not food_name.strip():
            raise DishSelectionError("Please select a dish.")

        food = self.find_food(food_name)
        if food is None:
            logger.warning(f"Dish not found: {food_name!r}")
            raise DishNotFoundError("Selected dish not found.")

        return calculate_pairing(food, self.wines)
