from decimal import Decimal
import logging
import unittest
from grocery.domain.Catalog import Catalog
from grocery.domain.Recipe import Recipe
from grocery.logic.shopping.list_builder import build_grocery_list


def _recipe(name, servings, *lines):
    recipe = Recipe(name, servings)
    for ingredient_name, quantity in lines:
        recipe.add_ingredient(ingredient_name, quantity)
    return recipe


class TestBuildGroceryList(unittest.TestCase):

    def setUp(self):
        self.catalog = Catalog()
        self.catalog.add_ingredient("Flour", "2.00", "lb")
        self.catalog.add_ingredient("Sugar", "1.50", "lb")
        self.catalog.add_recipe(_recipe("Cake", 8, ("Flour", 2), ("Sugar", 1)))
        self.catalog.add_recipe(_recipe("Cookies", 12, ("Flour", 1), ("Sugar", "0.5")))
        self.catalog.add_recipe(_recipe("Pie", 6, ("Flour", 2), ("Butter", 1)))
        self.catalog.add_recipe(Recipe("Water", 1))

    def test_cake_and_cookies(self):
        result = build_grocery_list(self.catalog, ["Cake", "Cookies"])
        self.assertEqual([i.name for i in result.items], ["Flour", "Sugar"])
        flour, sugar = result.items
        self.assertEqual(flour.quantity, Decimal("3"))
        self.assertEqual(flour.cost, Decimal("6.00"))
        self.assertEqual(sugar.quantity, Decimal("1.5"))
        self.assertEqual(sugar.cost, Decimal("2.25"))
        self.assertEqual(result.total, Decimal("8.25"))
        self.assertFalse(result.is_partial)
        self.assertEqual(result.total_label, "ESTIMATED TOTAL COST")

    def test_selection_order_does_not_change_totals(self):
        forward = build_grocery_list(self.catalog, ["Cake", "Cookies"])
        backward = build_grocery_list(self.catalog, ["cookies", "CAKE"])
        self.assertEqual([(i.name, i.quantity) for i in forward.items],
                         [(i.name, i.quantity) for i in backward.items])
        self.assertEqual(forward.total, backward.total)

    def test_duplicate_selection_counts_twice(self):
        result = build_grocery_list(self.catalog, ["Cake", "Cake"])
        self.assertEqual(result.get_item("flour").quantity, Decimal("4"))
        self.assertEqual([r.name for r in result.recipes], ["Cake"])

    def test_unpriced_ingredient_makes_partial(self):
        result = build_grocery_list(self.catalog, ["Pie"])
        butter = result.get_item("Butter")
        self.assertIsNone(butter.cost)
        self.assertFalse(butter.is_priced)
        self.assertTrue(result.has_missing_ingredients)
        self.assertEqual(result.total, Decimal("4.00"))
        self.assertEqual(result.total_label, "PARTIAL ESTIMATED COST")
        self.assertEqual([i.name for i in result.unpriced_items], ["Butter"])

    def test_unknown_recipes_are_skipped_with_warning(self):
        with self.assertLogs("grocery.logic.shopping.list_builder", level=logging.WARNING) as logs:
            result = build_grocery_list(self.catalog, ["Nope", "Cake"])
        self.assertEqual(result.missing_recipes, ["Nope"])
        self.assertEqual([r.name for r in result.recipes], ["Cake"])
        self.assertEqual(len(result.items), 2)
        self.assertTrue(any("Nope" in line for line in logs.output))

    def test_empty_and_invalid_selections_give_empty_result(self):
        for names in ([], None, ["Ghost", "Phantom"], ["Water"]):
            result = build_grocery_list(self.catalog, names)
            self.assertTrue(result.is_empty)
            self.assertEqual(result.total, Decimal("0"))
            self.assertFalse(result.is_partial)

    def test_case_variants_across_recipes_are_one_line(self):
        self.catalog.add_recipe(_recipe("Bread", 2, ("FLOUR", "0.25")))
        result = build_grocery_list(self.catalog, ["Cake", "Bread"])
        self.assertEqual(len([i for i in result.items if i.name.lower() == "flour"]), 1)
        self.assertEqual(result.get_item("Flour").quantity, Decimal("2.25"))
        # priced lines take the catalog spelling
        self.assertEqual(result.get_item("Flour").name, "Flour")

    def test_items_sorted_case_insensitively(self):
        self.catalog.add_recipe(_recipe("Mix", 1, ("banana", 1), ("Apple", 1), ("cherry", 1)))
        result = build_grocery_list(self.catalog, ["Mix"])
        self.assertEqual([i.name for i in result.items], ["Apple", "banana", "cherry"])

    def test_rounding_only_at_display(self):
        self.catalog.add_ingredient("Spice", "0.333", "g")
        self.catalog.add_recipe(_recipe("Dust", 1, ("Spice", 3)))
        result = build_grocery_list(self.catalog, ["Dust"])
        self.assertEqual(result.total, Decimal("0.999"))
        self.assertEqual(result.to_dict()["total"], "1.00")
