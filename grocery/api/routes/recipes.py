from fastapi import APIRouter, Depends, HTTPException

from grocery.api.state import get_catalog
from grocery.domain.Catalog import Catalog
from grocery.domain.errors import ValidationError
from grocery.domain.numbers import round_money
from grocery.domain.Recipe import Recipe
from grocery.logic.reporting.costing import compute_recipe_cost
from grocery.utilities.validators import RecipeInput, RecipeLineInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def recipe_json(recipe: Recipe) -> dict:
    return {
        "name": recipe.name,
        "servings": recipe.servings,
        "ingredients": [
            {"ingredient_name": line.ingredient_name, "quantity": str(line.quantity)}
            for line in recipe.ingredients
        ],
    }


def _require(catalog: Catalog, name: str) -> Recipe:
    recipe = catalog.get_recipe(name)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{name}' not found")
    return recipe


@router.get("")
def list_recipes(catalog: Catalog = Depends(get_catalog)):
    return {"names": catalog.get_all_recipe_names(), "items": [recipe_json(r) for r in catalog.list_recipes()]}


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, catalog: Catalog = Depends(get_catalog)):
    try:
        recipe = Recipe(payload.name, payload.servings)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    for line in payload.ingredients:
        recipe.add_ingredient(line.ingredient_name, line.quantity)
    if not catalog.add_recipe(recipe):
        raise HTTPException(status_code=400, detail="Recipe with this name already exists")
    return recipe_json(recipe)


@router.get("/{name}")
def recipe_detail(name: str, catalog: Catalog = Depends(get_catalog)):
    recipe = _require(catalog, name)
    cost = compute_recipe_cost(catalog, recipe)
    data = recipe_json(recipe)
    data["lines"] = [line.to_dict() for line in cost.lines]
    data["total"] = str(round_money(cost.total))
    data["cost_per_serving"] = (
        str(round_money(cost.cost_per_serving)) if cost.cost_per_serving is not None else None
    )
    data["partial"] = cost.has_missing_ingredients
    return data


@router.delete("/{name}")
def delete_recipe(name: str, catalog: Catalog = Depends(get_catalog)):
    if not catalog.delete_recipe(name):
        raise HTTPException(status_code=404, detail=f"Recipe '{name}' not found")
    return {"status": "deleted", "name": name}


@router.post("/{name}/ingredients")
def add_line(name: str, payload: RecipeLineInput, catalog: Catalog = Depends(get_catalog)):
    recipe = _require(catalog, name)
    if not recipe.add_ingredient(payload.ingredient_name, payload.quantity):
        raise HTTPException(status_code=400, detail="Invalid ingredient line")
    return recipe_json(recipe)


@router.delete("/{name}/ingredients/{ingredient_name}")
def remove_line(name: str, ingredient_name: str, catalog: Catalog = Depends(get_catalog)):
    recipe = _require(catalog, name)
    if not recipe.remove_ingredient(ingredient_name):
        raise HTTPException(status_code=404, detail=f"'{ingredient_name}' is not part of '{recipe.name}'")
    return recipe_json(recipe)
