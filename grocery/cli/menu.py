"""Interactive console menu for managing the catalog and generating grocery lists.

Input and output are injected callables (input/print by default) so the whole
loop can be driven from tests with scripted answers.
"""
import logging
from decimal import Decimal
from pathlib import Path
from typing import Callable, List, Optional

from grocery.domain.Catalog import Catalog
from grocery.domain.errors import PersistenceError, ValidationError
from grocery.domain.numbers import format_quantity, to_decimal
from grocery.domain.Recipe import Recipe
from grocery.infra.Catalog_Repository import CatalogRepository
from grocery.infra.Grocery_Exporter import export_grocery_list
from grocery.logic.reporting.grocery_report import (
    render_grocery_list, render_ingredients, render_recipe_details, render_recipes
)
from grocery.logic.shopping.list_builder import build_grocery_list
from grocery.utilities.constants import DEFAULT_UNIT

logger = logging.getLogger(__name__)

MAIN_MENU = """
═══════════════ MAIN MENU ═══════════════
1. Manage Ingredients
2. Manage Recipes
3. Select Recipes & Generate Grocery List
4. Save Data
5. Load Data
6. Exit
═════════════════════════════════════════
"""

INGREDIENT_MENU = """
─────── INGREDIENT MANAGEMENT ───────
1. Add New Ingredient
2. View All Ingredients
3. Update Ingredient Price
4. Delete Ingredient
5. Back to Main Menu
─────────────────────────────────────
"""

RECIPE_MENU = """
─────── RECIPE MANAGEMENT ───────
1. Create New Recipe
2. View All Recipes
3. View Recipe Details
4. Add Ingredient to Recipe
5. Remove Ingredient from Recipe
6. Delete Recipe
7. Back to Main Menu
─────────────────────────────────────
"""


def parse_selection(text: str, count: int) -> List[int]:
    """Turn '1, 3,4' into zero-based indexes, ignoring anything outside 1..count."""
    indexes: List[int] = []
    for part in (text or "").split(","):
        part = part.strip()
        if not part.isdigit():
            continue
        number = int(part)
        if 1 <= number <= count:
            indexes.append(number - 1)
    return indexes


class ConsoleMenu:
    def __init__(self, catalog: Catalog, repository: CatalogRepository,
                 input_func: Callable[[str], str] = input, output: Callable[[str], None] = print,
                 export_dir: Optional[Path] = None):
        self.catalog = catalog
        self.repository = repository
        self._input = input_func
        self._output = output
        self.export_dir = export_dir

    # --- Prompt helpers ----------------------------------------------------
    def _say(self, message: str = ""):
        self._output(message)

    def _ask(self, prompt: str) -> str:
        return (self._input(prompt) or "").strip()

    def _ask_decimal(self, prompt: str) -> Optional[Decimal]:
        try:
            return to_decimal(self._ask(prompt), "Value")
        except ValidationError:
            return None

    def _ask_int(self, prompt: str, default: Optional[int] = None) -> Optional[int]:
        answer = self._ask(prompt)
        if not answer and default is not None:
            return default
        try:
            return int(answer)
        except ValueError:
            return None

    def _confirm(self, prompt: str) -> bool:
        return self._ask(prompt).lower() in ("y", "yes")

    # --- Main loop ---------------------------------------------------------
    def run(self):
        self._say("╔════════════════════════════════════════════╗")
        self._say("║   Welcome to Smart Grocery List Manager    ║")
        self._say("╚════════════════════════════════════════════╝")
        self.load_data(quiet=True)
        actions = {
            "1": self.ingredient_menu,
            "2": self.recipe_menu,
            "3": self.generate_grocery_list,
            "4": self.save_data,
            "5": self.load_data,
        }
        while True:
            self._say(MAIN_MENU)
            choice = self._ask("Select an option: ")
            if choice == "6":
                if self._confirm("Save data before exiting? (y/n): "):
                    self.save_data()
                self._say("\nThank you for using Smart Grocery List Manager!")
                return
            action = actions.get(choice)
            if action is None:
                self._say("\n✗ Invalid option. Please try again.")
                continue
            action()

    def ingredient_menu(self):
        actions = {
            "1": self.add_ingredient,
            "2": lambda: self._say("\n" + render_ingredients(self.catalog)),
            "3": self.update_ingredient_price,
            "4": self.delete_ingredient,
        }
        self._submenu(INGREDIENT_MENU, actions, back="5")

    def recipe_menu(self):
        actions = {
            "1": self.create_recipe,
            "2": lambda: self._say("\n" + render_recipes(self.catalog)),
            "3": self.view_recipe_details,
            "4": self.add_recipe_ingredient,
            "5": self.remove_recipe_ingredient,
            "6": self.delete_recipe,
        }
        self._submenu(RECIPE_MENU, actions, back="7")

    def _submenu(self, text: str, actions, back: str):
        while True:
            self._say(text)
            choice = self._ask("Select an option: ")
            if choice == back:
                return
            action = actions.get(choice)
            if action is None:
                self._say("\n✗ Invalid option. Please try again.")
                continue
            action()

    # --- Ingredients -------------------------------------------------------
    def add_ingredient(self):
        name = self._ask("Enter ingredient name: ")
        if not name:
            self._say("✗ Ingredient name cannot be empty.")
            return
        price = self._ask_decimal("Enter price per unit: $")
        if price is None or price < 0:
            self._say("\n✗ Invalid price. Must be a non-negative number.")
            return
        unit = self._ask(f"Enter unit (e.g., lb, oz, each) [{DEFAULT_UNIT}]: ") or DEFAULT_UNIT
        if self.catalog.add_ingredient(name, price, unit):
            self._say(f"\n✓ Ingredient '{name}' added successfully!")
        else:
            self._say(f"\n✗ Ingredient '{name}' already exists.")

    def update_ingredient_price(self):
        name = self._ask("Enter ingredient name: ")
        price = self._ask_decimal("Enter new price per unit: $")
        if price is None or price < 0:
            self._say("\n✗ Invalid price. Must be a non-negative number.")
            return
        if self.catalog.update_ingredient_price(name, price):
            self._say(f"\n✓ Price for '{name}' updated successfully!")
        else:
            self._say(f"\n✗ Ingredient '{name}' not found.")

    def delete_ingredient(self):
        name = self._ask("Enter ingredient name to delete: ")
        if self.catalog.delete_ingredient(name):
            self._say(f"\n✓ Ingredient '{name}' deleted successfully!")
        else:
            self._say(f"\n✗ Ingredient '{name}' not found.")

    # --- Recipes -----------------------------------------------------------
    def create_recipe(self):
        name = self._ask("Enter recipe name: ")
        if not name:
            self._say("✗ Recipe name cannot be empty.")
            return
        if self.catalog.get_recipe(name) is not None:
            self._say(f"\n✗ Recipe '{name}' already exists.")
            return
        servings = self._ask_int("Enter number of servings [4]: ", default=4)
        try:
            recipe = Recipe(name, servings)
        except ValidationError:
            self._say("✗ Invalid number of servings.")
            return

        self._say("\nAdd ingredients to the recipe (type 'done' when finished):")
        self._collect_lines(recipe)

        if self.catalog.add_recipe(recipe):
            self._say(f"\n✓ Recipe '{recipe.name}' created successfully with "
                      f"{recipe.get_ingredient_count()} ingredients!")
        else:
            self._say(f"\n✗ Recipe '{recipe.name}' already exists.")

    def _collect_lines(self, recipe: Recipe):
        while True:
            ingredient_name = self._ask("\nIngredient name (or 'done'): ")
            if not ingredient_name or ingredient_name.lower() == "done":
                return
            quantity = self._ask_decimal(f"Quantity of {ingredient_name}: ")
            if quantity is None or quantity <= 0:
                self._say("✗ Invalid quantity. Skipping this ingredient.")
                continue
            if recipe.add_ingredient(ingredient_name, quantity):
                self._say(f"✓ Added {format_quantity(quantity)} unit(s) of {ingredient_name}")
                if self.catalog.get_ingredient(ingredient_name) is None:
                    self._say(f"  (note: '{ingredient_name}' is not in the ingredient list yet)")
            else:
                self._say("✗ Failed to add ingredient.")

    def _pick_recipe(self) -> Optional[Recipe]:
        name = self._ask("Enter recipe name: ")
        recipe = self.catalog.get_recipe(name)
        if recipe is None:
            self._say(f"\n✗ Recipe '{name}' not found.")
        return recipe

    def view_recipe_details(self):
        recipe = self._pick_recipe()
        if recipe is not None:
            self._say("\n" + render_recipe_details(self.catalog, recipe))

    def add_recipe_ingredient(self):
        recipe = self._pick_recipe()
        if recipe is not None:
            self._collect_lines(recipe)

    def remove_recipe_ingredient(self):
        recipe = self._pick_recipe()
        if recipe is None:
            return
        ingredient_name = self._ask("Ingredient to remove: ")
        if recipe.remove_ingredient(ingredient_name):
            self._say(f"\n✓ Removed '{ingredient_name}' from '{recipe.name}'.")
        else:
            self._say(f"\n✗ '{ingredient_name}' is not part of '{recipe.name}'.")

    def delete_recipe(self):
        name = self._ask("Enter recipe name to delete: ")
        if self.catalog.delete_recipe(name):
            self._say(f"\n✓ Recipe '{name}' deleted successfully!")
        else:
            self._say(f"\n✗ Recipe '{name}' not found.")

    # --- Grocery list ------------------------------------------------------
    def generate_grocery_list(self):
        recipes = self.catalog.list_recipes()
        if not recipes:
            self._say("\n✗ No recipes available. Please create recipes first.")
            return
        self._say("\n─────── AVAILABLE RECIPES ───────")
        self._say(render_recipes(self.catalog, numbered=True))
        self._say("─────────────────────────────────\n")
        answer = self._ask("Enter recipe numbers to include (comma-separated, e.g., 1,3,4): ")
        indexes = parse_selection(answer, len(recipes))
        if not indexes:
            self._say("\n✗ No valid recipes selected.")
            return

        grocery_list = build_grocery_list(self.catalog, [recipes[i].name for i in indexes])
        self._say("\n" + render_grocery_list(grocery_list))
        if grocery_list.is_empty:
            return
        if self._confirm("\nWould you like to save this grocery list to a file? (y/n): "):
            try:
                path = export_grocery_list(grocery_list, self.export_dir)
            except PersistenceError as e:
                self._say(f"\n✗ {e}")
                return
            self._say(f"\n✓ Grocery list saved to: {path}")

    # --- Persistence -------------------------------------------------------
    def save_data(self):
        try:
            self.repository.save(self.catalog)
        except PersistenceError as e:
            self._say(f"\n✗ {e}")
            return
        self._say("\n✓ Data saved successfully!")

    def load_data(self, quiet: bool = False):
        try:
            result = self.repository.load(self.catalog)
        except PersistenceError as e:
            self._say(f"\n✗ Error loading data: {e}")
            return
        if not quiet:
            self._say(f"\n✓ Data loaded successfully! ({result})")
