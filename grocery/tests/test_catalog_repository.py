from decimal import Decimal
import json
import pytest
from grocery.domain.Catalog import Catalog
from grocery.domain.errors import PersistenceError
from grocery.domain.Recipe import Recipe
from grocery.infra.Catalog_Repository import CatalogRepository
from grocery.utilities.backup import BackupManager


@pytest.fixture
def repo(tmp_path):
    return CatalogRepository(
        tmp_path / "ingredients.json",
        tmp_path / "recipes.json",
        BackupManager(tmp_path / "backups", keep=2),
    )


@pytest.fixture
def catalog():
    c = Catalog()
    c.add_ingredient("Flour", "2.00", "lb")
    c.add_ingredient("Sugar", "1.50", "lb")
    c.add_ingredient("Saffron", "0.1", "g")
    cake = Recipe("Cake", 8)
    cake.add_ingredient("Flour", 2)
    cake.add_ingredient("Sugar", "0.5")
    pie = Recipe("Pie", 6)
    pie.add_ingredient("Butter", 1)
    c.add_recipe(cake)
    c.add_recipe(pie)
    return c


def _snapshot(c):
    ingredients = {(i.name, i.price_per_unit, i.unit) for i in c.list_ingredients()}
    recipes = {
        (r.name, r.servings, tuple((l.ingredient_name, l.quantity) for l in r.ingredients))
        for r in c.list_recipes()
    }
    return ingredients, recipes


def test_save_then_load_reproduces_catalog(repo, catalog):
    repo.save(catalog)
    restored = Catalog()
    result = repo.load(restored)
    assert result.ingredients == 3
    assert result.recipes == 2
    assert _snapshot(restored) == _snapshot(catalog)
    assert restored.get_ingredient("saffron").price_per_unit == Decimal("0.1")


def test_saved_documents_are_readable_json(repo, catalog):
    repo.save(catalog)
    ingredients = json.loads(repo.ingredients_file.read_text(encoding="utf-8"))
    recipes = json.loads(repo.recipes_file.read_text(encoding="utf-8"))
    assert {"name": "Flour", "pricePerUnit": 2, "unit": "lb"} in ingredients
    cake = next(r for r in recipes if r["name"] == "Cake")
    assert cake["servings"] == 8
    assert cake["ingredients"] == [
        {"ingredientName": "Flour", "quantity": 2},
        {"ingredientName": "Sugar", "quantity": 0.5},
    ]


def test_load_replaces_instead_of_merging(repo, catalog):
    repo.save(catalog)
    other = Catalog()
    other.add_ingredient("Salt", 1)
    other.add_recipe(Recipe("Soup"))
    repo.load(other)
    assert other.get_ingredient("Salt") is None
    assert other.get_recipe("Soup") is None
    assert other.ingredient_count == 3


def test_missing_files_are_nothing_to_load(repo):
    target = Catalog()
    target.add_ingredient("Salt", 1)
    result = repo.load(target)
    assert result.ingredients is None and result.recipes is None
    assert target.get_ingredient("Salt") is not None


def test_malformed_file_leaves_catalog_untouched(repo, catalog):
    repo.save(catalog)
    repo.recipes_file.write_text('[{"name": "Bad", "servings": 0, "ingredients": []}]', encoding="utf-8")
    target = Catalog()
    target.add_ingredient("Salt", 1)
    with pytest.raises(PersistenceError):
        repo.load(target)
    assert target.ingredient_count == 1
    assert target.get_ingredient("Salt") is not None


def test_invalid_json_raises_persistence_error(repo):
    repo.ingredients_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(PersistenceError) as excinfo:
        repo.load(Catalog())
    assert "ingredients.json" in str(excinfo.value)


def test_accepts_pascal_case_keys_and_blank_units(repo):
    repo.ingredients_file.write_text(
        '[{"Name": "Flour", "PricePerUnit": 2.00, "Unit": ""}]', encoding="utf-8")
    repo.recipes_file.write_text(
        '[{"Name": "Cake", "Servings": 8, "Ingredients": [{"IngredientName": "Flour", "Quantity": 2}]}]',
        encoding="utf-8")
    target = Catalog()
    repo.load(target)
    assert target.get_ingredient("flour").unit == "unit"
    assert target.get_ingredient("flour").price_per_unit == Decimal("2.00")
    assert target.get_recipe("cake").get_ingredient_quantity("Flour") == Decimal("2")


def test_duplicate_records_keep_first(repo):
    repo.ingredients_file.write_text(
        '[{"name": "Flour", "pricePerUnit": 2}, {"name": "FLOUR", "pricePerUnit": 9}]', encoding="utf-8")
    target = Catalog()
    result = repo.load(target)
    assert result.ingredients == 1
    assert target.get_ingredient("flour").price_per_unit == Decimal("2")


def test_save_keeps_limited_backups(repo, catalog):
    for _ in range(4):
        repo.save(catalog)
    backups = repo.backup_manager.list_backups(repo.ingredients_file)
    assert 1 <= len(backups) <= 2


def test_long_decimals_survive_save_and_load(repo):
    c = Catalog()
    c.add_ingredient("Saffron", "0.12345678901234567891", "g")
    c.add_ingredient("Gold", "1E+30", "oz")
    paella = Recipe("Paella")
    paella.add_ingredient("Saffron", "0.33333333333333333333")
    c.add_recipe(paella)
    repo.save(c)

    restored = Catalog()
    repo.load(restored)
    assert restored.get_ingredient("saffron").price_per_unit == Decimal("0.12345678901234567891")
    assert restored.get_ingredient("gold").price_per_unit == Decimal("1E+30")
    assert restored.get_recipe("paella").get_ingredient_quantity("saffron") == Decimal("0.33333333333333333333")
    assert "0.12345678901234567891" in repo.ingredients_file.read_text(encoding="utf-8")


def test_failed_save_keeps_previous_documents(tmp_path, catalog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    ingredients_file = tmp_path / "ingredients.json"
    ingredients_file.write_text("[]", encoding="utf-8")
    repo = CatalogRepository(ingredients_file, blocker / "recipes.json", BackupManager(tmp_path / "backups"))

    with pytest.raises(PersistenceError) as excinfo:
        repo.save(catalog)
    assert "recipes.json" in str(excinfo.value)
    assert ingredients_file.read_text(encoding="utf-8") == "[]"
    assert not [p for p in tmp_path.iterdir() if p.name.startswith(".")]
