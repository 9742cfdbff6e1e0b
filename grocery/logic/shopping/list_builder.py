"""Grocery list builder.

Provides build_grocery_list(catalog, recipe_names): sums the ingredient lines
of every selected recipe into one list and prices it against the catalog.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from grocery.domain.Catalog import Catalog
from grocery.domain.GroceryList import GroceryItem, GroceryList
from grocery.domain.NameIndex import NameIndex
from grocery.domain.Recipe import Recipe

logger = logging.getLogger(__name__)


def _sort_key(name: str):
    return (name.lower(), name)


def accumulate_quantities(recipes: Iterable[Recipe]) -> NameIndex[Decimal]:
    """Sum line quantities per ingredient name (case-insensitive) across recipes.

    The first spelling met for a name is the one kept for display.
    """
    totals: NameIndex[Decimal] = NameIndex()
    for recipe in recipes:
        for line in recipe.ingredients:
            current = totals.get(line.ingredient_name)
            if current is None:
                totals.add(line.ingredient_name, line.quantity)
            else:
                totals.set(line.ingredient_name, current + line.quantity)
    return totals


def build_grocery_list(catalog: Catalog, recipe_names: Optional[Iterable[str]]) -> GroceryList:
    """Compute the consolidated grocery list for the selected recipes.

    Args:
        catalog: Catalog used to resolve recipe names and ingredient prices.
        recipe_names: Recipe names in selection order. Unknown names are
            skipped with a warning; a name given twice counts twice.

    Returns:
        GroceryList with items sorted by name. Items whose ingredient is not
        in the catalog carry no price and make the list partial. An empty
        selection, or one whose recipes have no lines, gives an empty list.
    """
    selected: List[Recipe] = []
    selected_once: List[Recipe] = []
    missing: List[str] = []

    for recipe_name in recipe_names or []:
        recipe = catalog.get_recipe(recipe_name) if isinstance(recipe_name, str) else None
        if recipe is None:
            logger.warning(f"Recipe '{recipe_name}' not found. Skipping.")
            missing.append(recipe_name)
            continue
        selected.append(recipe)
        if not any(r is recipe for r in selected_once):
            selected_once.append(recipe)

    totals = accumulate_quantities(selected)
    if not len(totals):
        logger.info("No ingredients found in selected recipes.")
        return GroceryList(recipes=selected_once, missing_recipes=missing)

    items: List[GroceryItem] = []
    for name, quantity in sorted(totals.items(), key=lambda kv: _sort_key(kv[0])):
        ingredient = catalog.get_ingredient(name)
        if ingredient is None:
            logger.warning(f"Ingredient '{name}' has no price in the catalog")
            items.append(GroceryItem(name, quantity))
        else:
            items.append(GroceryItem(ingredient.name, quantity, ingredient.unit, ingredient.price_per_unit))

    return GroceryList(recipes=selected_once, items=items, missing_recipes=missing)


__all__ = ["build_grocery_list", "accumulate_quantities"]
