import unittest
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Meal import Meal, meal_key, split_key
from weekmenu.domain.ShoppingList import ShoppingItem, ShoppingList
from weekmenu.domain.errors import NotFoundError


class TestIngredient(unittest.TestCase):

    def test_create_trims_and_defaults_quantity(self):
        ingredient = Ingredient.create("  Gula Merah ", "")
        self.assertEqual(ingredient.name, "Gula Merah")
        self.assertEqual(ingredient.quantity, "1")
        self.assertFalse(ingredient.ready)

    def test_from_dict_keeps_stored_id(self):
        ingredient = Ingredient.from_dict({"id": 17, "name": "Kecap", "quantity": "2 sdm", "ready": True})
        self.assertEqual(ingredient.id, 17)
        self.assertTrue(ingredient.ready)

    def test_meal_finds_ingredient_by_string_id(self):
        meal = Meal("Semur", [Ingredient("Daging", "500g", id=17)])
        self.assertEqual(meal.find_ingredient("17").name, "Daging")
        self.assertIsNone(meal.find_ingredient("18"))

    def test_meal_key_round_trip_with_underscored_slot(self):
        key = meal_key("senin", "custom_1700000000000_ab12cd")
        self.assertEqual(split_key(key), ("senin", "custom_1700000000000_ab12cd"))


class TestShoppingList(unittest.TestCase):

    def test_toggle_and_stats(self):
        shopping_list = ShoppingList([ShoppingItem("Beras", "5 kg", id="a"), ShoppingItem("Telur", "1", id="b")])
        shopping_list.toggle("a")
        self.assertEqual(shopping_list.stats(), {"total": 2, "checked": 1, "remaining": 1})
        shopping_list.toggle("a")
        self.assertFalse(shopping_list.find("a").checked)

    def test_remove_unknown(self):
        with self.assertRaises(NotFoundError):
            ShoppingList().remove_item("x")

    def test_from_dict_skips_malformed_rows(self):
        shopping_list = ShoppingList.from_dict([{"id": "a", "name": "Beras", "quantity": None}, "junk"])
        self.assertEqual(len(shopping_list), 1)
        self.assertEqual(shopping_list.get_items()[0].quantity, "")
