from fastapi import APIRouter, Depends, Query

from weekmenu.api.deps import get_planner
from weekmenu.domain.ShoppingList import ShoppingList
from weekmenu.logic.planner import Planner
from weekmenu.logic.shopping.list_builder import sort_for_display
from weekmenu.utilities.validators import ShoppingItemInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


def _payload(shopping_list: ShoppingList, sort: str = ""):
    items = shopping_list.to_dict()
    if sort == "name":
        items = sort_for_display(items)
    return {"items": items, "count": len(items), "stats": shopping_list.stats()}


@router.get("")
def get_shopping_list(sort: str = Query(default="", pattern="^(name)?$"),
                      planner: Planner = Depends(get_planner)):
    return _payload(planner.get_shopping_list(), sort)


@router.post("/generate")
def generate_shopping_list(planner: Planner = Depends(get_planner)):
    """Rebuild the list from the meal plan, keeping checked items checked."""
    shopping_list = planner.generate_shopping_list()
    return {**_payload(shopping_list),
            "message": f"Shopping list generated: {len(shopping_list)} item(s) to buy."}


@router.post("/items", status_code=201)
def add_item(payload: ShoppingItemInput, planner: Planner = Depends(get_planner)):
    return planner.add_shopping_item(payload.name, payload.quantity).to_dict()


@router.post("/items/{item_id}/toggle")
def toggle_item(item_id: str, planner: Planner = Depends(get_planner)):
    return planner.toggle_item(item_id).to_dict()


@router.delete("/items/{item_id}")
def remove_item(item_id: str, planner: Planner = Depends(get_planner)):
    planner.remove_shopping_item(item_id)
    return {"success": True}


@router.delete("")
def clear_shopping_list(confirm: bool = Query(default=False), planner: Planner = Depends(get_planner)):
    planner.clear_shopping_list(confirmed=confirm)
    return {"success": True}
