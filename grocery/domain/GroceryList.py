"""GroceryList aggregate: the consolidated, priced result of combining several recipes."""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from grocery.domain.numbers import format_quantity, round_money
from grocery.domain.Recipe import Recipe
from grocery.utilities.constants import ESTIMATED_TOTAL_LABEL, PARTIAL_TOTAL_LABEL


class GroceryItem:
    def __init__(self, name: str, quantity: Decimal, unit: Optional[str] = None,
                 unit_price: Optional[Decimal] = None):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.unit_price = unit_price

    @property
    def is_priced(self) -> bool:
        return self.unit_price is not None

    @property
    def cost(self) -> Optional[Decimal]:
        '''unit_price * quantity, unrounded; None when the ingredient is not in the catalog.'''
        if self.unit_price is None:
            return None
        return self.unit_price * self.quantity

    def __str__(self) -> str:
        if self.is_priced:
            return f"{format_quantity(self.quantity)} {self.unit} of {self.name}"
        return f"{format_quantity(self.quantity)} unit(s) of {self.name}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        cost = self.cost
        return {
            "name": self.name,
            "quantity": str(self.quantity),
            "unit": self.unit,
            "unit_price": str(self.unit_price) if self.unit_price is not None else None,
            "cost": str(round_money(cost)) if cost is not None else None,
            "priced": self.is_priced,
        }


class GroceryList:
    def __init__(self, recipes: Optional[List[Recipe]] = None, items: Optional[List[GroceryItem]] = None,
                 missing_recipes: Optional[List[str]] = None):
        self.recipes = recipes[:] if recipes else []
        self.items = items[:] if items else []
        self.missing_recipes = missing_recipes[:] if missing_recipes else []

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_missing_ingredients(self) -> bool:
        return any(not item.is_priced for item in self.items)

    is_partial = has_missing_ingredients

    @property
    def unpriced_items(self) -> List[GroceryItem]:
        return [item for item in self.items if not item.is_priced]

    @property
    def total(self) -> Decimal:
        '''Sum of the priced items only; a lower bound when the list is partial.'''
        return sum((item.cost for item in self.items if item.is_priced), Decimal("0"))

    @property
    def total_label(self) -> str:
        return PARTIAL_TOTAL_LABEL if self.has_missing_ingredients else ESTIMATED_TOTAL_LABEL

    def get_item(self, name: str) -> Optional[GroceryItem]:
        key = (name or "").strip().lower()
        for item in self.items:
            if item.name.lower() == key:
                return item
        return None

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return f"Grocery List: {len(self.items)} items from {len(self.recipes)} recipes"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipes": [{"name": r.name, "servings": r.servings} for r in self.recipes],
            "missing_recipes": list(self.missing_recipes),
            "items": [item.to_dict() for item in self.items],
            "count": len(self.items),
            "total": str(round_money(self.total)),
            "total_label": self.total_label,
            "partial": self.has_missing_ingredients,
        }
