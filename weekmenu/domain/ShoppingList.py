"""ShoppingList aggregate: ordered items to buy, each with a checked flag."""
from typing import Any, List, Optional
from weekmenu.domain.Ingredient import new_id
from weekmenu.domain.errors import NotFoundError


class ShoppingItem:
    def __init__(self, name: str = "", quantity: str = "", checked: bool = False,
                 id: Optional[Any] = None):
        self.id = id if id is not None else new_id()
        self.name = name
        self.quantity = quantity
        self.checked = checked

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name} ({self.quantity})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        quantity = d.get("quantity")
        return ShoppingItem(
            name=str(d.get("name") or ""),
            quantity="" if quantity is None else str(quantity),
            checked=bool(d.get("checked", False)),
            id=d.get("id"),
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "quantity": self.quantity, "checked": self.checked}


class ShoppingList:
    def __init__(self, items: Optional[List[ShoppingItem]] = None):
        self.items: List[ShoppingItem] = items[:] if items else []

    def get_items(self):
        return self.items

    def find(self, item_id) -> Optional[ShoppingItem]:
        for item in self.items:
            if item.id == item_id or str(item.id) == str(item_id):
                return item
        return None

    def add_item(self, item: ShoppingItem):
        '''
        Adds an item to the end of the shopping list.
        '''
        self.items.append(item)
        return item

    def remove_item(self, item_id):
        '''
        Removes the item with the given id.
        '''
        item = self.find(item_id)
        if item is None:
            raise NotFoundError("Shopping item", item_id)
        self.items.remove(item)
        return item

    def toggle(self, item_id) -> ShoppingItem:
        item = self.find(item_id)
        if item is None:
            raise NotFoundError("Shopping item", item_id)
        item.checked = not item.checked
        return item

    def clear(self):
        self.items = []

    def stats(self) -> dict:
        total = len(self.items)
        checked = sum(1 for i in self.items if i.checked)
        return {"total": total, "checked": checked, "remaining": total - checked}

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''
        Builds a ShoppingList from the persisted list of item dictionaries.
        '''
        rows = data if isinstance(data, list) else []
        return ShoppingList([ShoppingItem.from_dict(r) for r in rows if isinstance(r, dict)])

    def to_dict(self):
        return [item.to_dict() for item in self.items]
