"""Recipe domain entity: name, servings and an ordered list of ingredient lines."""
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from grocery.domain.errors import ValidationError
from grocery.domain.NameIndex import normalize_name
from grocery.domain.RecipeIngredient import RecipeIngredient
from grocery.domain.numbers import to_decimal
from grocery.utilities.constants import DEFAULT_SERVINGS


class Recipe:
    def __init__(self, name: str, servings: int = DEFAULT_SERVINGS):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Recipe name cannot be empty.")
        self._name = name.strip()
        self._servings = DEFAULT_SERVINGS
        self.servings = servings
        self._lines: List[RecipeIngredient] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def servings(self) -> int:
        return self._servings

    @servings.setter
    def servings(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Servings must be a whole number, got {value!r}.")
        if value <= 0:
            raise ValidationError("Servings must be greater than zero.")
        self._servings = value

    def set_servings(self, value) -> bool:
        try:
            self.servings = value
        except ValidationError:
            return False
        return True

    @property
    def ingredients(self) -> Tuple[RecipeIngredient, ...]:
        '''Read-only view of the ingredient lines, in insertion order.'''
        return tuple(self._lines)

    def _find(self, ingredient_name: str) -> Optional[RecipeIngredient]:
        key = normalize_name(ingredient_name)
        for line in self._lines:
            if normalize_name(line.ingredient_name) == key:
                return line
        return None

    def add_ingredient(self, ingredient_name: str, quantity) -> bool:
        '''
        Adds a line, or increases the quantity of an existing line with the
        same name (case-insensitive). Returns False for a blank name or a
        quantity that is not a positive number.
        '''
        if not isinstance(ingredient_name, str) or not ingredient_name.strip():
            return False
        try:
            qty = to_decimal(quantity, "Quantity")
        except ValidationError:
            return False
        if qty <= 0:
            return False

        existing = self._find(ingredient_name)
        if existing is not None:
            existing.quantity = existing.quantity + qty
        else:
            self._lines.append(RecipeIngredient(ingredient_name, qty))
        return True

    def remove_ingredient(self, ingredient_name: str) -> bool:
        line = self._find(ingredient_name)
        if line is None:
            return False
        self._lines.remove(line)
        return True

    def get_ingredient_count(self) -> int:
        return len(self._lines)

    def get_ingredient_names(self) -> List[str]:
        return [line.ingredient_name for line in self._lines]

    def get_ingredient_quantity(self, ingredient_name: str) -> Decimal:
        """Quantity of the named line, or 0 when the recipe does not use it."""
        line = self._find(ingredient_name)
        return line.quantity if line is not None else Decimal("0")

    def name_equals(self, other_name: str) -> bool:
        return normalize_name(other_name) == normalize_name(self._name)

    def __str__(self) -> str:
        return f"{self._name} (Serves {self._servings}) - {len(self._lines)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        recipe = Recipe(data.get("name", ""), data.get("servings", DEFAULT_SERVINGS))
        for line in data.get("ingredients", []) or []:
            recipe.add_ingredient(line.get("ingredientName", ""), line.get("quantity", 0))
        return recipe

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "servings": self._servings,
            "ingredients": [line.to_dict() for line in self._lines],
        }
