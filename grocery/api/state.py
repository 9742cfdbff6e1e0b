"""Process-wide catalog shared by the API routes.

Routes receive the catalog and repository through FastAPI dependencies, so
tests can swap them with app.dependency_overrides.
"""
from grocery.domain.Catalog import Catalog
from grocery.infra.Catalog_Repository import CatalogRepository

_catalog = Catalog()
_repository = CatalogRepository()


def get_catalog() -> Catalog:
    return _catalog


def get_repository() -> CatalogRepository:
    return _repository


__all__ = ['get_catalog', 'get_repository']
