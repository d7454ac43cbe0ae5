from fastapi import APIRouter, Depends, Query

from weekmenu.api.deps import get_planner
from weekmenu.logic.planner import Planner
from weekmenu.utilities.validators import (
    IngredientInput, IngredientListInput, IngredientUpdateInput, MealNameInput
)

router = APIRouter(prefix="/api/plan", tags=["plan"])


@router.get("")
def get_plan(planner: Planner = Depends(get_planner)):
    """Whole week: every day with its slots, resolved labels and stored meals."""
    return {"days": planner.week_view()}


@router.get("/{day}/{slot}")
def get_meal(day: str, slot: str, planner: Planner = Depends(get_planner)):
    planner.require_slot(day, slot)
    meal = planner.get_meal(day, slot)
    return {"day": day, "slot": slot, "label": planner.label_of(day, slot),
            "meal": meal.to_dict() if meal else None}


@router.put("/{day}/{slot}/name")
def set_meal_name(day: str, slot: str, payload: MealNameInput, planner: Planner = Depends(get_planner)):
    meal = planner.set_meal_name(day, slot, payload.name)
    return {"success": True, "meal": meal.to_dict()}


@router.put("/{day}/{slot}/ingredients")
def set_ingredients(day: str, slot: str, payload: IngredientListInput,
                    planner: Planner = Depends(get_planner)):
    meal = planner.set_ingredients(day, slot, [i.model_dump() for i in payload.ingredients])
    return {"success": True, "meal": meal.to_dict()}


@router.post("/{day}/{slot}/ingredients", status_code=201)
def add_ingredient(day: str, slot: str, payload: IngredientInput, planner: Planner = Depends(get_planner)):
    ingredient = planner.add_ingredient(day, slot, payload.name, payload.quantity, payload.ready)
    return {"success": True, "ingredient": ingredient.to_dict()}


@router.patch("/{day}/{slot}/ingredients/{ingredient_id}")
def update_ingredient(day: str, slot: str, ingredient_id: str, payload: IngredientUpdateInput,
                      planner: Planner = Depends(get_planner)):
    ingredient = planner.update_ingredient(day, slot, ingredient_id,
                                           name=payload.name, quantity=payload.quantity, ready=payload.ready)
    return {"success": True, "ingredient": ingredient.to_dict()}


@router.delete("/{day}/{slot}/ingredients/{ingredient_id}")
def remove_ingredient(day: str, slot: str, ingredient_id: str, planner: Planner = Depends(get_planner)):
    planner.remove_ingredient(day, slot, ingredient_id)
    return {"success": True}


@router.delete("")
def clear_plan(confirm: bool = Query(default=False), planner: Planner = Depends(get_planner)):
    planner.clear_meal_plan(confirmed=confirm)
    return {"success": True}
