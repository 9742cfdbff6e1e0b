"""Recipe costing: price each line of a recipe against the catalog."""
from decimal import Decimal
from typing import List, Optional

from grocery.domain.Catalog import Catalog
from grocery.domain.GroceryList import GroceryItem
from grocery.domain.Recipe import Recipe

__all__ = ["RecipeCost", "compute_recipe_cost"]


class RecipeCost:
    def __init__(self, recipe: Recipe, lines: List[GroceryItem]):
        self.recipe = recipe
        self.lines = lines

    @property
    def has_missing_ingredients(self) -> bool:
        return any(not line.is_priced for line in self.lines)

    @property
    def total(self) -> Decimal:
        return sum((line.cost for line in self.lines if line.is_priced), Decimal("0"))

    @property
    def cost_per_serving(self) -> Optional[Decimal]:
        """None when some line is unpriced, since the total would understate the cost."""
        if self.has_missing_ingredients:
            return None
        return self.total / self.recipe.servings


def compute_recipe_cost(catalog: Catalog, recipe: Recipe) -> RecipeCost:
    lines: List[GroceryItem] = []
    for line in recipe.ingredients:
        ingredient = catalog.get_ingredient(line.ingredient_name)
        if ingredient is None:
            lines.append(GroceryItem(line.ingredient_name, line.quantity))
        else:
            lines.append(GroceryItem(ingredient.name, line.quantity, ingredient.unit, ingredient.price_per_unit))
    return RecipeCost(recipe, lines)
