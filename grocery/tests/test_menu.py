from decimal import Decimal
import unittest
from grocery.cli.menu import ConsoleMenu, parse_selection
from grocery.domain.Catalog import Catalog
from grocery.domain.errors import PersistenceError
from grocery.domain.Recipe import Recipe


class FakeRepository:
    def __init__(self, fail=False):
        self.saved = 0
        self.fail = fail

    def save(self, catalog):
        if self.fail:
            raise PersistenceError("Error saving ingredients.json: disk full")
        self.saved += 1

    def load(self, catalog):
        return "nothing to load"


class TestParseSelection(unittest.TestCase):

    def test_ignores_invalid_parts(self):
        self.assertEqual(parse_selection("1, 3,x, 9,0,2", 3), [0, 2, 1])
        self.assertEqual(parse_selection("", 3), [])


class TestConsoleMenu(unittest.TestCase):

    def _run(self, answers, catalog=None, repository=None, export_dir=None):
        self.output = []
        feed = iter(answers)
        menu = ConsoleMenu(
            catalog if catalog is not None else Catalog(),
            repository or FakeRepository(),
            input_func=lambda prompt: next(feed),
            output=self.output.append,
            export_dir=export_dir,
        )
        menu.run()
        return menu

    @property
    def text(self):
        return "\n".join(self.output)

    def test_add_and_update_ingredient(self):
        menu = self._run(["1", "1", "Flour", "2.00", "lb", "1", "flour", "3", "lb",
                          "3", "FLOUR", "2.50", "5", "6", "n"])
        ingredient = menu.catalog.get_ingredient("Flour")
        self.assertEqual(ingredient.price_per_unit, Decimal("2.50"))
        self.assertIn("✗ Ingredient 'flour' already exists.", self.text)
        self.assertIn("✓ Price for 'FLOUR' updated successfully!", self.text)

    def test_invalid_price_is_reported(self):
        menu = self._run(["1", "1", "Salt", "-1", "5", "6", "n"])
        self.assertEqual(menu.catalog.ingredient_count, 0)
        self.assertIn("Invalid price", self.text)

    def test_create_recipe_merges_duplicate_lines(self):
        menu = self._run(["2", "1", "Cake", "8", "Flour", "2", "Eggs", "zero", "flour", "1", "done",
                          "7", "6", "n"])
        recipe = menu.catalog.get_recipe("cake")
        self.assertEqual(recipe.servings, 8)
        self.assertEqual(recipe.get_ingredient_quantity("Flour"), Decimal("3"))
        self.assertEqual(recipe.get_ingredient_count(), 1)
        self.assertIn("Invalid quantity", self.text)
        self.assertIn("created successfully with 1 ingredients", self.text)

    def test_generate_and_export_grocery_list(self):
        import tempfile
        from pathlib import Path
        catalog = Catalog()
        catalog.add_ingredient("Flour", "2.00", "lb")
        catalog.add_ingredient("Sugar", "1.50", "lb")
        cake = Recipe("Cake", 8)
        cake.add_ingredient("Flour", 2)
        cake.add_ingredient("Sugar", 1)
        cookies = Recipe("Cookies", 12)
        cookies.add_ingredient("Flour", 1)
        cookies.add_ingredient("Sugar", "0.5")
        catalog.add_recipe(cake)
        catalog.add_recipe(cookies)
        with tempfile.TemporaryDirectory() as tmp:
            self._run(["3", "1,2", "y", "6", "n"], catalog=catalog, export_dir=Path(tmp))
            exported = list(Path(tmp).glob("GroceryList_*.txt"))
            self.assertEqual(len(exported), 1)
        self.assertIn("ESTIMATED TOTAL COST: $8.25", self.text)
        self.assertIn("✓ Grocery list saved to:", self.text)

    def test_no_valid_selection(self):
        catalog = Catalog()
        catalog.add_recipe(Recipe("Cake"))
        self._run(["3", "7", "6", "n"], catalog=catalog)
        self.assertIn("No valid recipes selected", self.text)

    def test_save_failure_is_reported_and_loop_continues(self):
        self._run(["4", "9", "6", "n"], repository=FakeRepository(fail=True))
        self.assertIn("✗ Error saving ingredients.json: disk full", self.text)
        self.assertIn("Invalid option", self.text)
        self.assertIn("Thank you for using", self.text)

    def test_exit_offers_save(self):
        repository = FakeRepository()
        self._run(["6", "y"], repository=repository)
        self.assertEqual(repository.saved, 1)
