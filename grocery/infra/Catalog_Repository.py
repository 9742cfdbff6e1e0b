"""Catalog repository: JSON persistence of ingredients and recipes.

Two documents are kept side by side, one per entity. Loading validates both
documents completely before the catalog is touched, so a malformed file
leaves the in-memory state exactly as it was.
"""
import json
import logging
import os
import shutil
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError as SchemaError

from grocery.domain.Catalog import Catalog
from grocery.domain.errors import PersistenceError, ValidationError
from grocery.domain.Ingredient import Ingredient
from grocery.domain.Recipe import Recipe
from grocery.infra.paths import BACKUP_DIR, INGREDIENTS_FILE, RECIPES_FILE
from grocery.utilities.backup import BackupManager
from grocery.utilities.validators import IngredientRecord, RecipeRecord

logger = logging.getLogger(__name__)

_INGREDIENT_RECORDS = TypeAdapter(List[IngredientRecord])
_RECIPE_RECORDS = TypeAdapter(List[RecipeRecord])


def _to_json(value, level: int = 0) -> str:
    """Indented JSON text. Decimals are written with their exact digits."""
    pad = "  " * (level + 1)
    close = "  " * level
    if isinstance(value, dict):
        if not value:
            return "{}"
        body = ",\n".join(
            f"{pad}{json.dumps(str(k), ensure_ascii=False)}: {_to_json(v, level + 1)}" for k, v in value.items()
        )
        return "{\n" + body + "\n" + close + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        return "[\n" + ",\n".join(pad + _to_json(v, level + 1) for v in value) + "\n" + close + "]"
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot write non-finite amount {value!r}")
        return str(value)
    return json.dumps(value, ensure_ascii=False)


class LoadResult:
    def __init__(self, ingredients: Optional[int] = None, recipes: Optional[int] = None):
        # None means the file was absent and that side of the catalog was left alone
        self.ingredients = ingredients
        self.recipes = recipes

    def __str__(self) -> str:
        parts = []
        if self.ingredients is not None:
            parts.append(f"{self.ingredients} ingredients")
        if self.recipes is not None:
            parts.append(f"{self.recipes} recipes")
        return ", ".join(parts) if parts else "nothing to load"

    __repr__ = __str__


class CatalogRepository:
    def __init__(self, ingredients_file: Path = INGREDIENTS_FILE, recipes_file: Path = RECIPES_FILE,
                 backup_manager: Optional[BackupManager] = None):
        self.ingredients_file = Path(ingredients_file)
        self.recipes_file = Path(recipes_file)
        self.backup_manager = backup_manager if backup_manager is not None else BackupManager(BACKUP_DIR)

    # --- Saving ------------------------------------------------------------
    def save(self, catalog: Catalog) -> None:
        """Write both documents. Raises PersistenceError if either cannot be written.

        Both documents are staged as temporary files first and only moved into
        place once both were written, so a failed save keeps the old pair.
        """
        documents = [
            (self.ingredients_file, [i.to_dict() for i in catalog.list_ingredients()]),
            (self.recipes_file, [r.to_dict() for r in catalog.list_recipes()]),
        ]
        self.backup_manager.backup_all([path for path, _ in documents])
        staged: List[Tuple[str, Path]] = []
        current = None
        try:
            for path, data in documents:
                current = path
                staged.append((self._write_temp(path, data), path))
            for tmp_path, path in staged:
                current = path
                shutil.move(tmp_path, path)
        except OSError as e:
            logger.error(f"Error saving {current.name}: {e}")
            raise PersistenceError(f"Error saving {current.name}: {e}", current) from e
        finally:
            for tmp_path, _ in staged:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        logger.info(f"Saved {len(documents[0][1])} ingredients and {len(documents[1][1])} recipes")

    @staticmethod
    def _write_temp(path: Path, data: Any) -> str:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=path.suffix)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(_to_json(data) + "\n")
        except OSError:
            os.remove(tmp_path)
            raise
        return tmp_path

    # --- Loading -----------------------------------------------------------
    @staticmethod
    def _read_json(path: Path) -> Optional[Any]:
        if not path.exists():
            logger.warning(f"Data file not found: {path}. Nothing to load.")
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Invalid JSON in {path.name}: {e}", path) from e
        except OSError as e:
            raise PersistenceError(f"Error reading {path.name}: {e}", path) from e

    def read_ingredients(self) -> Optional[List[Ingredient]]:
        data = self._read_json(self.ingredients_file)
        if data is None:
            return None
        try:
            records = _INGREDIENT_RECORDS.validate_python(data)
            return [Ingredient(r.name, r.price_per_unit, r.unit) for r in records]
        except (SchemaError, ValidationError) as e:
            raise PersistenceError(f"Malformed {self.ingredients_file.name}: {e}", self.ingredients_file) from e

    def read_recipes(self) -> Optional[List[Recipe]]:
        data = self._read_json(self.recipes_file)
        if data is None:
            return None
        try:
            records = _RECIPE_RECORDS.validate_python(data)
            recipes = []
            for record in records:
                recipe = Recipe(record.name, record.servings)
                for line in record.ingredients:
                    recipe.add_ingredient(line.ingredient_name, line.quantity)
                recipes.append(recipe)
            return recipes
        except (SchemaError, ValidationError) as e:
            raise PersistenceError(f"Malformed {self.recipes_file.name}: {e}", self.recipes_file) from e

    def load(self, catalog: Catalog) -> LoadResult:
        """Replace the catalog contents with the persisted documents.

        A missing file leaves that half of the catalog untouched. Any parse or
        validation failure raises PersistenceError before anything is replaced.
        """
        ingredients = self.read_ingredients()
        recipes = self.read_recipes()
        result = LoadResult()
        if ingredients is not None:
            result.ingredients = catalog.replace_ingredients(ingredients)
        if recipes is not None:
            result.recipes = catalog.replace_recipes(recipes)
        logger.info(f"Loaded {result}")
        return result
