"""Plain-text rendering of catalogs, recipes and grocery lists.

The console menu prints these strings and the exporter writes them to disk,
so both surfaces show the same figures.
"""
from datetime import datetime
from typing import List, Optional

from grocery.domain.Catalog import Catalog
from grocery.domain.GroceryList import GroceryItem, GroceryList
from grocery.domain.numbers import format_money, format_quantity
from grocery.domain.Recipe import Recipe
from grocery.logic.reporting.costing import compute_recipe_cost
from grocery.utilities.constants import GENERATED_AT_FORMAT

__all__ = [
    "render_ingredients", "render_recipes", "render_recipe_details",
    "render_grocery_list", "render_grocery_file", "NO_INGREDIENTS_MESSAGE",
]

WIDTH = 55
HEAVY = "═" * WIDTH
LIGHT = "─" * WIDTH
NO_INGREDIENTS_MESSAGE = "✗ No ingredients found in selected recipes."


def _banner(title: str) -> List[str]:
    return ["╔" + HEAVY + "╗", "║" + title.center(WIDTH) + "║", "╚" + HEAVY + "╝"]


def render_ingredients(catalog: Catalog) -> str:
    ingredients = catalog.list_ingredients()
    if not ingredients:
        return "✗ No ingredients available."
    lines = _banner("INGREDIENT LIST")
    lines += [f"  • {ingredient}" for ingredient in ingredients]
    lines.append("")
    lines.append(f"Total Ingredients: {len(ingredients)}")
    return "\n".join(lines)


def render_recipes(catalog: Catalog, numbered: bool = False) -> str:
    recipes = catalog.list_recipes()
    if not recipes:
        return "✗ No recipes available."
    if numbered:
        return "\n".join(f"{i}. {recipe}" for i, recipe in enumerate(recipes, start=1))
    lines = _banner("RECIPE LIST")
    lines += [f"  • {recipe}" for recipe in recipes]
    lines.append("")
    lines.append(f"Total Recipes: {len(recipes)}")
    return "\n".join(lines)


def render_recipe_details(catalog: Catalog, recipe: Recipe) -> str:
    cost = compute_recipe_cost(catalog, recipe)
    lines = _banner(recipe.name.upper())
    lines.append(f"Servings: {recipe.servings}")
    lines.append("")
    lines.append(f"Ingredients ({recipe.get_ingredient_count()}):")
    for line in cost.lines:
        if line.is_priced:
            lines.append(f"  • {format_quantity(line.quantity)} {line.unit} of {line.name} ({format_money(line.cost)})")
        else:
            lines.append(f"  • {format_quantity(line.quantity)} unit(s) of {line.name} [INGREDIENT NOT IN SYSTEM]")
    lines.append("")
    if cost.has_missing_ingredients:
        lines.append("⚠ Some ingredients are not in the system. Add them to calculate cost.")
    else:
        lines.append(f"Estimated Total Cost: {format_money(cost.total)}")
        lines.append(f"Cost Per Serving: {format_money(cost.cost_per_serving)}")
    return "\n".join(lines)


def _item_lines(item: GroceryItem, indent: str, missing_note: str) -> List[str]:
    qty = format_quantity(item.quantity)
    if item.is_priced:
        return [
            f"{indent}[ ] {qty} {item.unit} of {item.name}",
            f"{indent}    {format_money(item.unit_price)} per {item.unit} = {format_money(item.cost)}",
        ]
    return [
        f"{indent}[ ] {qty} unit(s) of {item.name}",
        f"{indent}    {missing_note}",
    ]


def _body(grocery_list: GroceryList, indent: str, missing_note: str, partial_note: str) -> List[str]:
    lines = [f"RECIPES SELECTED: {len(grocery_list.recipes)}"]
    lines += [f"  • {recipe.name} (serves {recipe.servings})" for recipe in grocery_list.recipes]
    lines += ["", LIGHT, f"ITEMS TO PURCHASE: {len(grocery_list.items)}", LIGHT, ""]
    for item in grocery_list.items:
        lines += _item_lines(item, indent, missing_note)
        lines.append("")
    lines.append(HEAVY)
    lines.append(f"{grocery_list.total_label}: {format_money(grocery_list.total)}")
    if grocery_list.has_missing_ingredients:
        lines.append(partial_note)
    lines.append(HEAVY)
    return lines


def render_grocery_list(grocery_list: GroceryList) -> str:
    '''Interactive display of a grocery list, including skipped recipe warnings.'''
    lines = [f"⚠ Warning: Recipe '{name}' not found. Skipping." for name in grocery_list.missing_recipes]
    if grocery_list.is_empty:
        lines.append(NO_INGREDIENTS_MESSAGE)
        return "\n".join(lines)
    if lines:
        lines.append("")
    lines += _banner("GROCERY LIST")
    lines.append("")
    lines += _body(
        grocery_list, "  ",
        "[Price not available - ingredient not in system]",
        "⚠ Some ingredients missing from system - total may be higher",
    )
    return "\n".join(lines)


def render_grocery_file(grocery_list: GroceryList, generated_at: Optional[datetime] = None) -> str:
    '''Layout written to exported grocery list files.'''
    generated_at = generated_at or datetime.now()
    lines = [
        HEAVY,
        "GROCERY LIST".center(WIDTH).rstrip(),
        f"Generated: {generated_at.strftime(GENERATED_AT_FORMAT)}".center(WIDTH).rstrip(),
        HEAVY,
        "",
    ]
    lines += _body(
        grocery_list, "",
        "[Price not available]",
        "(Some ingredients missing - total may be higher)",
    )
    return "\n".join(lines) + "\n"
