"""Ingredient domain entity: name, price per unit, unit of measure."""
from decimal import Decimal
from typing import Any, Dict

from grocery.domain.errors import ValidationError
from grocery.domain.NameIndex import normalize_name
from grocery.domain.numbers import format_money, to_decimal
from grocery.utilities.constants import DEFAULT_UNIT


class Ingredient:
    def __init__(self, name: str, price_per_unit=Decimal("0"), unit: str = DEFAULT_UNIT):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Ingredient name cannot be empty.")
        self._name = name.strip()
        self._price_per_unit = Decimal("0")
        self.price_per_unit = price_per_unit
        self._unit = unit.strip() if isinstance(unit, str) and unit.strip() else DEFAULT_UNIT

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def price_per_unit(self) -> Decimal:
        return self._price_per_unit

    @price_per_unit.setter
    def price_per_unit(self, value):
        price = to_decimal(value, "Price")
        if price < 0:
            raise ValidationError("Price cannot be negative.")
        self._price_per_unit = price

    def set_price(self, value) -> bool:
        '''Updates the price, returning False instead of raising when the value is rejected.'''
        try:
            self.price_per_unit = value
        except ValidationError:
            return False
        return True

    def calculate_cost(self, quantity) -> Decimal:
        return self._price_per_unit * to_decimal(quantity, "Quantity")

    def name_equals(self, other_name: str) -> bool:
        return normalize_name(other_name) == normalize_name(self._name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.name_equals(other.name)

    def __hash__(self) -> int:
        return hash(normalize_name(self._name))

    def __str__(self) -> str:
        return f"{self._name} - {format_money(self._price_per_unit)} per {self._unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Ingredient":
        '''Creates an Ingredient from its persisted form. Raises ValidationError on bad values.'''
        return Ingredient(data.get("name", ""), data.get("pricePerUnit", 0), data.get("unit", DEFAULT_UNIT))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "pricePerUnit": self._price_per_unit,
            "unit": self._unit,
        }
