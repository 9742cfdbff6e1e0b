from fastapi import APIRouter, Depends

from grocery.api.state import get_catalog, get_repository
from grocery.domain.Catalog import Catalog
from grocery.infra.Catalog_Repository import CatalogRepository

router = APIRouter(prefix="/api/data", tags=["data"])


@router.post("/save")
def save_data(catalog: Catalog = Depends(get_catalog), repository: CatalogRepository = Depends(get_repository)):
    repository.save(catalog)
    return {"status": "saved", "ingredients": catalog.ingredient_count, "recipes": catalog.recipe_count}


@router.post("/load")
def load_data(catalog: Catalog = Depends(get_catalog), repository: CatalogRepository = Depends(get_repository)):
    result = repository.load(catalog)
    return {"status": "loaded", "ingredients": result.ingredients, "recipes": result.recipes}
