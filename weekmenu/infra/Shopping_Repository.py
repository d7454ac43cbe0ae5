from weekmenu.domain.ShoppingList import ShoppingList
from weekmenu.infra.storage import JsonStorage
from weekmenu.utilities.constants import SHOPPING_LIST_KEY



class ShoppingListRepository:
    def __init__(self, storage: JsonStorage):
        self.storage = storage

    def load(self) -> ShoppingList:
        return ShoppingList.from_dict(self.storage.get(SHOPPING_LIST_KEY, [], expected_type=list))

    def save(self, shopping_list: ShoppingList) -> None:
        """Replace the stored list with shopping_list as a whole."""
        self.storage.set(SHOPPING_LIST_KEY, shopping_list.to_dict())
