"""Catalog aggregate: the priced ingredients and the recipes known to the application.

Every operation reports success through its return value; lookups that miss
return None or False rather than raising.
"""
import logging
from typing import Iterable, List, Optional

from grocery.domain.errors import ValidationError
from grocery.domain.Ingredient import Ingredient
from grocery.domain.NameIndex import NameIndex
from grocery.domain.Recipe import Recipe
from grocery.utilities.constants import DEFAULT_UNIT

logger = logging.getLogger(__name__)


class Catalog:
    def __init__(self):
        self._ingredients: NameIndex[Ingredient] = NameIndex()
        self._recipes: NameIndex[Recipe] = NameIndex()

    # --- Ingredients -------------------------------------------------------
    def add_ingredient(self, name: str, price, unit: str = DEFAULT_UNIT) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        if name in self._ingredients:
            return False
        try:
            ingredient = Ingredient(name, price, unit)
        except ValidationError as e:
            logger.info(f"Rejected ingredient '{name}': {e}")
            return False
        return self._ingredients.add(ingredient.name, ingredient)

    def update_ingredient_price(self, name: str, new_price) -> bool:
        ingredient = self._ingredients.get(name)
        if ingredient is None:
            return False
        return ingredient.set_price(new_price)

    def delete_ingredient(self, name: str) -> bool:
        return self._ingredients.remove(name)

    def get_ingredient(self, name: str) -> Optional[Ingredient]:
        return self._ingredients.get(name)

    def list_ingredients(self) -> List[Ingredient]:
        return sorted(self._ingredients.values(), key=lambda i: (i.name.lower(), i.name))

    @property
    def ingredient_count(self) -> int:
        return len(self._ingredients)

    # --- Recipes -----------------------------------------------------------
    def add_recipe(self, recipe: Optional[Recipe]) -> bool:
        if recipe is None or not recipe.name.strip():
            return False
        return self._recipes.add(recipe.name, recipe)

    def delete_recipe(self, name: str) -> bool:
        return self._recipes.remove(name)

    def get_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.get(name)

    def get_all_recipe_names(self) -> List[str]:
        '''Recipe names in lexicographic order.'''
        return sorted(self._recipes)

    def list_recipes(self) -> List[Recipe]:
        return sorted(self._recipes.values(), key=lambda r: r.name)

    @property
    def recipe_count(self) -> int:
        return len(self._recipes)

    # --- Bulk --------------------------------------------------------------
    def replace_ingredients(self, ingredients: Iterable[Ingredient]) -> int:
        '''Replaces every ingredient. Later duplicates (by name) are dropped. Returns the number kept.'''
        fresh: NameIndex[Ingredient] = NameIndex()
        for ingredient in ingredients:
            if not fresh.add(ingredient.name, ingredient):
                logger.warning(f"Duplicate ingredient '{ingredient.name}' ignored")
        self._ingredients = fresh
        return len(fresh)

    def replace_recipes(self, recipes: Iterable[Recipe]) -> int:
        fresh: NameIndex[Recipe] = NameIndex()
        for recipe in recipes:
            if not fresh.add(recipe.name, recipe):
                logger.warning(f"Duplicate recipe '{recipe.name}' ignored")
        self._recipes = fresh
        return len(fresh)

    def __str__(self) -> str:
        return f"Catalog: {self.ingredient_count} ingredients, {self.recipe_count} recipes"

    __repr__ = __str__
