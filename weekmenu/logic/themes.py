"""CSS custom properties for each colour theme."""
from typing import Dict
from weekmenu.utilities.constants import DAYS, DEFAULT_THEME, THEMES


def theme_variables(name: str) -> Dict[str, str]:
    """Return the ``--theme-*`` variables for a theme; unknown names fall back to default."""
    t = THEMES.get(name) or THEMES[DEFAULT_THEME]
    variables = {
        '--theme-primary': t['primary'],
        '--theme-secondary': t['secondary'],
        '--theme-accent': t['accent'],
        '--theme-bg-start': t['bg_start'],
        '--theme-bg-end': t['bg_end'],
        '--theme-header': (f"linear-gradient(135deg, {t['primary']} 0%, "
                           f"{t['secondary']} 50%, {t['accent']} 100%)"),
    }
    for day, colour in zip(DAYS, t['days']):
        variables[f'--theme-day-{day}'] = colour
    return variables


__all__ = ['theme_variables']
