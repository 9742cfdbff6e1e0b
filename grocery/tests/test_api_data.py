import httpx
import pytest
from grocery.api.api_run import app
from grocery.api.state import get_catalog, get_repository
from grocery.domain.Catalog import Catalog
from grocery.domain.errors import PersistenceError
from grocery.infra.Catalog_Repository import CatalogRepository
from grocery.utilities.backup import BackupManager


class BrokenRepository:
    def save(self, catalog):
        raise PersistenceError("Error saving recipes.json: read-only file system")

    def load(self, catalog):
        raise PersistenceError("Malformed recipes.json")


@pytest.fixture
def catalog():
    c = Catalog()
    c.add_ingredient("Flour", "2.00", "lb")
    return c


@pytest.mark.asyncio
async def test_save_and_load_round_trip(tmp_path, catalog):
    """Save through the API, wipe the catalog, then load it back."""
    repo = CatalogRepository(tmp_path / "ingredients.json", tmp_path / "recipes.json",
                             BackupManager(tmp_path / "backups"))
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/data/save")
            assert resp.status_code == 200
            assert resp.json()["ingredients"] == 1

            catalog.delete_ingredient("Flour")
            resp = await ac.post("/api/data/load")
            assert resp.status_code == 200
            assert resp.json()["ingredients"] == 1
    finally:
        app.dependency_overrides.clear()
    assert catalog.get_ingredient("flour") is not None


@pytest.mark.asyncio
async def test_persistence_errors_become_500(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_repository] = lambda: BrokenRepository()
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/data/load")
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Malformed recipes.json"
    assert catalog.ingredient_count == 1
