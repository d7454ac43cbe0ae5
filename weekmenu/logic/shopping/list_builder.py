"""Shopping list builder.

Provides aggregate_ingredients(meals): turns the whole meal plan into one
entry per distinct ingredient, skipping ingredients the user already has.
Quantities are free text and are combined textually, never parsed.
"""
from typing import Dict, Iterable, List, Tuple, Union, Mapping
from weekmenu.domain.Meal import Meal
from weekmenu.utilities.constants import DEFAULT_QUANTITY


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def _is_unspecified(qty: str) -> bool:
    # "1" doubles as "unspecified"; a real single unit cannot be told apart
    return not qty or qty == DEFAULT_QUANTITY


def combine_quantities(qty1: str, qty2: str) -> str:
    """Merge two quantity strings.

    combine("1", "1") -> "1"; combine("2 pcs", "1") -> "2 pcs";
    combine("2 pcs", "3 pcs") -> "2 pcs + 3 pcs".
    """
    if _is_unspecified(qty1):
        return qty2 or DEFAULT_QUANTITY
    if _is_unspecified(qty2):
        return qty1
    return f"{qty1} + {qty2}"


def _meals_of(plan: Union[Mapping[str, Meal], Iterable[Tuple[str, Meal]]]) -> Iterable[Meal]:
    if isinstance(plan, Mapping):
        return plan.values()
    return (meal for _, meal in plan)


def aggregate_ingredients(plan) -> List[Dict[str, str]]:
    """Compute the deduplicated ingredient list for a meal plan.

    Args:
        plan: mapping of meal key -> Meal, or an iterable of (key, Meal) pairs,
              in store order.

    Returns:
        List of dicts { name, quantity } in first-seen order. The first
        occurrence of a name (case-insensitive, trimmed) fixes its display
        casing. Ready ingredients are left out entirely; an empty list means
        there is nothing to shop for.
    """
    merged: Dict[str, Dict[str, str]] = {}
    for meal in _meals_of(plan):
        for ing in meal.ingredients:
            if ing.ready:
                continue
            key = _normalize(ing.name)
            if not key:
                continue
            existing = merged.get(key)
            if existing is None:
                merged[key] = {'name': ing.name.strip(), 'quantity': ing.quantity or DEFAULT_QUANTITY}
            else:
                existing['quantity'] = combine_quantities(existing['quantity'], ing.quantity)
    return list(merged.values())


def sort_for_display(items: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Alphabetical, case-insensitive copy of an aggregate; presentation only."""
    return sorted(items, key=lambda x: x['name'].casefold())


__all__ = ['aggregate_ingredients', 'combine_quantities', 'sort_for_display']
