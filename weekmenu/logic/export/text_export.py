"""Plain-text export of the weekly menu.

The layout follows the downloadable "Daftar Menu" file: a banner, one
section per day with its filled meals and their ingredients, then a summary
of what to buy. The summary comes from aggregate_ingredients, so ready
ingredients are left out exactly as on the shopping list.
"""
from datetime import date
from typing import Any, Dict, List

from weekmenu.domain.errors import NothingToExport
from weekmenu.infra.Plan_Repository import MealPlanStore
from weekmenu.infra.Slot_Registry import SlotRegistry
from weekmenu.logic.shopping.list_builder import aggregate_ingredients
from weekmenu.logic.slots.labels import resolve_slot_label
from weekmenu.utilities.constants import DAYS, EXPORT_RULE_WIDTH

TITLE = "DAFTAR MENU MAKANAN MINGGUAN"
SUMMARY_TITLE = "RINGKASAN BAHAN BELANJA"
INGREDIENTS_HEADING = "Bahan-bahan:"
NO_INGREDIENTS = "Belum ada bahan yang ditambahkan."


def plan_rows(plan: MealPlanStore, slots: SlotRegistry) -> List[Dict[str, Any]]:
    """Days that have at least one named meal, each with its meals in slot order.

    Raises NothingToExport when no meal has a name.
    """
    rows = []
    for day in DAYS:
        meals = []
        for slot in slots.list_slots(day):
            meal = plan.get(day, slot.id)
            if meal is None or not meal.name:
                continue
            meals.append({
                'label': resolve_slot_label(day, slot.id, slots.custom, plan.meals),
                'name': meal.name,
                'ingredients': [{'name': i.name, 'quantity': i.quantity, 'ready': i.ready}
                                for i in meal.ingredients],
            })
        if meals:
            rows.append({'day': day, 'title': day.capitalize(), 'meals': meals})
    if not rows:
        raise NothingToExport()
    return rows


def render_plan_text(plan: MealPlanStore, slots: SlotRegistry) -> str:
    rows = plan_rows(plan, slots)
    rule = '=' * EXPORT_RULE_WIDTH
    lines = [rule, TITLE, rule, '']
    for row in rows:
        lines.append(row['title'].upper())
        lines.append('-' * EXPORT_RULE_WIDTH)
        for meal in row['meals']:
            lines.append(f"  {meal['label']}: {meal['name']}")
            if meal['ingredients']:
                lines.append(f"    {INGREDIENTS_HEADING}")
                for ing in meal['ingredients']:
                    lines.append(f"      - {ing['name']} ({ing['quantity']})")
            lines.append('')

    lines += ['', rule, SUMMARY_TITLE, rule, '']
    summary = aggregate_ingredients(plan.items())
    if summary:
        lines += [f"- {item['name']} ({item['quantity']})" for item in summary]
    else:
        lines.append(NO_INGREDIENTS)
    return '\n'.join(lines) + '\n'


def export_filename(extension: str = "txt", today: date = None) -> str:
    today = today or date.today()
    return f"Daftar_Menu_{today.isoformat()}.{extension}"


__all__ = ['plan_rows', 'render_plan_text', 'export_filename']
