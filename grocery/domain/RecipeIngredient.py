"""Recipe line item: an ingredient name and the quantity a recipe needs.

The ingredient is referenced by name only, so a recipe stays valid when the
ingredient is missing from the catalog or deleted later.
"""
from decimal import Decimal
from typing import Any, Dict

from grocery.domain.errors import ValidationError
from grocery.domain.numbers import format_quantity, to_decimal


class RecipeIngredient:
    def __init__(self, ingredient_name: str, quantity):
        if not isinstance(ingredient_name, str) or not ingredient_name.strip():
            raise ValidationError("Ingredient name cannot be empty.")
        self._ingredient_name = ingredient_name.strip()
        self._quantity = Decimal("0")
        self.quantity = quantity

    @property
    def ingredient_name(self) -> str:
        return self._ingredient_name

    @property
    def quantity(self) -> Decimal:
        return self._quantity

    @quantity.setter
    def quantity(self, value):
        qty = to_decimal(value, "Quantity")
        if qty <= 0:
            raise ValidationError("Quantity must be greater than zero.")
        self._quantity = qty

    def __str__(self) -> str:
        return f"{format_quantity(self._quantity)} unit(s) of {self._ingredient_name}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {"ingredientName": self._ingredient_name, "quantity": self._quantity}
