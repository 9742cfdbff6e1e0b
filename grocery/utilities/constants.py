from decimal import Decimal
from typing import Final

DEFAULT_UNIT: Final[str] = "unit"
DEFAULT_SERVINGS: Final[int] = 4
CURRENCY_SYMBOL: Final[str] = "$"
MONEY_PLACES: Final[Decimal] = Decimal("0.01")

INGREDIENTS_FILENAME: Final[str] = "ingredients.json"
RECIPES_FILENAME: Final[str] = "recipes.json"
EXPORT_PREFIX: Final[str] = "GroceryList"
EXPORT_TIMESTAMP_FORMAT: Final[str] = "%Y%m%d_%H%M%S"
GENERATED_AT_FORMAT: Final[str] = "%Y-%m-%d %H:%M"

ESTIMATED_TOTAL_LABEL: Final[str] = "ESTIMATED TOTAL COST"
PARTIAL_TOTAL_LABEL: Final[str] = "PARTIAL ESTIMATED COST"
