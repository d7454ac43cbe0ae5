"""Reconcile a freshly aggregated ingredient list with the saved shopping list."""
from typing import Any, Callable, Dict, Iterable, List
from weekmenu.domain.Ingredient import new_id
from weekmenu.domain.ShoppingList import ShoppingItem


def merge_shopping_list(aggregated: Iterable[Dict[str, str]], previous: Iterable[ShoppingItem],
                        id_factory: Callable[[], Any] = new_id) -> List[ShoppingItem]:
    """Build the new shopping list without losing the user's progress.

    Items whose lowercase name matches a previous item take over that item's
    id and checked flag but keep the new quantity. Previous items with no
    match are appended unchanged, so manual additions survive regeneration.
    """
    previous = list(previous)
    fresh = [ShoppingItem(name=a['name'], quantity=a['quantity'], checked=False, id=id_factory())
             for a in aggregated]

    by_name: Dict[str, ShoppingItem] = {}
    for item in previous:
        # later duplicates win, as a plain dict build would
        by_name[item.name.lower()] = item

    for item in fresh:
        old = by_name.get(item.name.lower())
        if old is not None:
            item.id = old.id
            item.checked = old.checked

    fresh_names = {item.name.lower() for item in fresh}
    orphans = [ShoppingItem(p.name, p.quantity, p.checked, id=p.id)
               for p in previous if p.name.lower() not in fresh_names]
    return fresh + orphans


__all__ = ['merge_shopping_list']
