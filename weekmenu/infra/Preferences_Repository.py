import logging
from weekmenu.domain.errors import ValidationError
from weekmenu.infra.storage import JsonStorage
from weekmenu.utilities.constants import DEFAULT_THEME, THEME_KEY, THEMES

logger = logging.getLogger(__name__)


class PreferencesRepository:
    def __init__(self, storage: JsonStorage):
        self.storage = storage

    def get_theme(self) -> str:
        theme = self.storage.get(THEME_KEY, DEFAULT_THEME, expected_type=str)
        if theme not in THEMES:
            logger.warning("Unknown stored theme %r; using %s", theme, DEFAULT_THEME)
            return DEFAULT_THEME
        return theme

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValidationError(f"Unknown theme '{theme}'. Expected one of: {', '.join(THEMES)}",
                                  field="theme")
        self.storage.set(THEME_KEY, theme)
        return theme
