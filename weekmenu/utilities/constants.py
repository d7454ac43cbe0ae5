from typing import Final

DAYS: Final[tuple[str, ...]] = ("senin", "selasa", "rabu", "kamis", "jumat", "sabtu", "minggu")

# Fixed slots available on every day, in display order
BASE_SLOTS: Final[dict[str, str]] = {
    "sarapan": "Sarapan",
    "siang": "Makan Siang",
    "malam": "Makan Malam",
}

DEFAULT_CUSTOM_SLOT_LABEL: Final[str] = "Additional Item"
FALLBACK_SLOT_LABEL: Final[str] = "Additional Menu"
CUSTOM_SLOT_PREFIX: Final[str] = "custom"
DEFAULT_QUANTITY: Final[str] = "1"
DEFAULT_MEAL_NAME: Final[str] = "Makanan"

# Storage keys (one JSON document each)
MEAL_PLAN_KEY: Final[str] = "mealPlan"
SHOPPING_LIST_KEY: Final[str] = "shoppingList"
CUSTOM_SLOTS_KEY: Final[str] = "customSlots"
TEMPLATES_KEY: Final[str] = "mealTemplates"
THEME_KEY: Final[str] = "theme"

DEFAULT_THEME: Final[str] = "default"
EXPORT_RULE_WIDTH: Final[int] = 60

# primary, secondary, accent, bg-start, bg-end, header gradient stops = primary/secondary/accent
# days: one colour per entry of DAYS
THEMES: Final[dict[str, dict]] = {
    "default": {
        "primary": "#ff6b6b", "secondary": "#ffa500", "accent": "#ffd700",
        "bg_start": "#ff9a9e", "bg_end": "#fecfef",
        "days": ["#ff6b6b", "#ffa500", "#ffd700", "#98d8c8", "#6c5ce7", "#a29bfe", "#fd79a8"],
    },
    "green": {
        "primary": "#11998e", "secondary": "#38ef7d", "accent": "#a8e063",
        "bg_start": "#a8e063", "bg_end": "#d4fc79",
        "days": ["#11998e", "#38ef7d", "#a8e063", "#00b894", "#00cec9", "#55efc4", "#81ecec"],
    },
    "blue": {
        "primary": "#667eea", "secondary": "#764ba2", "accent": "#a29bfe",
        "bg_start": "#a8c0ff", "bg_end": "#d4e4ff",
        "days": ["#667eea", "#764ba2", "#a29bfe", "#6c5ce7", "#5f4fcf", "#8e7fff", "#b8b3ff"],
    },
    "purple": {
        "primary": "#6c5ce7", "secondary": "#a29bfe", "accent": "#fd79a8",
        "bg_start": "#d4b3ff", "bg_end": "#f0d4ff",
        "days": ["#6c5ce7", "#a29bfe", "#fd79a8", "#5f4fcf", "#8e7fff", "#b8b3ff", "#ffb8d9"],
    },
    "orange": {
        "primary": "#ff7675", "secondary": "#fdcb6e", "accent": "#e17055",
        "bg_start": "#ffb8b8", "bg_end": "#ffe5b8",
        "days": ["#ff7675", "#fdcb6e", "#e17055", "#ff6b6b", "#ffa500", "#ff8c00", "#ff6348"],
    },
    "ocean": {
        "primary": "#0984e3", "secondary": "#74b9ff", "accent": "#00b894",
        "bg_start": "#81ecec", "bg_end": "#b8e6e6",
        "days": ["#0984e3", "#74b9ff", "#00b894", "#00cec9", "#55efc4", "#81ecec", "#a8e6cf"],
    },
}
