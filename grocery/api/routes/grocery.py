import logging

from fastapi import APIRouter, Depends, Response

from grocery.api.state import get_catalog
from grocery.domain.Catalog import Catalog
from grocery.infra.Grocery_Exporter import export_grocery_list
from grocery.infra.pdf_utils import generate_pdf_for_grocery_list
from grocery.logic.shopping.list_builder import build_grocery_list
from grocery.utilities.validators import GroceryListRequest

router = APIRouter(prefix="/api/grocery-list", tags=["grocery-list"])
logger = logging.getLogger(__name__)


@router.post("")
def grocery_list(payload: GroceryListRequest, catalog: Catalog = Depends(get_catalog)):
    result = build_grocery_list(catalog, payload.recipes)
    data = result.to_dict()
    data["empty"] = result.is_empty
    return data


@router.post("/pdf")
def grocery_list_pdf(payload: GroceryListRequest, catalog: Catalog = Depends(get_catalog)):
    result = build_grocery_list(catalog, payload.recipes)
    pdf_bytes = generate_pdf_for_grocery_list(result)
    headers = {"Content-Disposition": 'attachment; filename="grocery_list.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)


@router.post("/export")
def grocery_list_export(payload: GroceryListRequest, catalog: Catalog = Depends(get_catalog)):
    result = build_grocery_list(catalog, payload.recipes)
    path = export_grocery_list(result)
    return {"path": str(path), "count": len(result), "partial": result.is_partial}
