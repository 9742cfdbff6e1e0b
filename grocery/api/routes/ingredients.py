from fastapi import APIRouter, Depends, HTTPException

from grocery.api.state import get_catalog
from grocery.domain.Catalog import Catalog
from grocery.domain.Ingredient import Ingredient
from grocery.utilities.validators import IngredientInput, PriceUpdateInput

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])


def ingredient_json(ingredient: Ingredient) -> dict:
    return {
        "name": ingredient.name,
        "price_per_unit": str(ingredient.price_per_unit),
        "unit": ingredient.unit,
    }


@router.get("")
def list_ingredients(catalog: Catalog = Depends(get_catalog)):
    items = [ingredient_json(i) for i in catalog.list_ingredients()]
    return {"items": items, "count": len(items)}


@router.post("", status_code=201)
def add_ingredient(payload: IngredientInput, catalog: Catalog = Depends(get_catalog)):
    if not catalog.add_ingredient(payload.name, payload.price_per_unit, payload.unit):
        raise HTTPException(status_code=400, detail=f"Ingredient '{payload.name}' already exists")
    return ingredient_json(catalog.get_ingredient(payload.name))


@router.put("/{name}/price")
def update_price(name: str, payload: PriceUpdateInput, catalog: Catalog = Depends(get_catalog)):
    if not catalog.update_ingredient_price(name, payload.price_per_unit):
        raise HTTPException(status_code=404, detail=f"Ingredient '{name}' not found")
    return ingredient_json(catalog.get_ingredient(name))


@router.delete("/{name}")
def delete_ingredient(name: str, catalog: Catalog = Depends(get_catalog)):
    if not catalog.delete_ingredient(name):
        raise HTTPException(status_code=404, detail=f"Ingredient '{name}' not found")
    return {"status": "deleted", "name": name}
