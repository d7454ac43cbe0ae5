import logging
from datetime import datetime
from typing import Dict, List
from weekmenu.domain.Template import Template
from weekmenu.domain.errors import NotFoundError
from weekmenu.infra.storage import JsonStorage
from weekmenu.utilities.constants import TEMPLATES_KEY

logger = logging.getLogger(__name__)


class TemplateStore:
    """Named snapshots of the meal plan and slot registry.

    Templates are frozen at save time: ``get`` hands out copies, so applying
    or editing what it returns never touches the stored snapshot.
    """

    def __init__(self, storage: JsonStorage):
        self.storage = storage

    def _load(self) -> List[Template]:
        raw = self.storage.get(TEMPLATES_KEY, [], expected_type=list)
        return [Template.from_dict(t) for t in raw if isinstance(t, dict)]

    def _write(self, templates: List[Template]) -> None:
        self.storage.set(TEMPLATES_KEY, [t.to_dict() for t in templates])

    def list(self) -> List[Template]:
        return self._load()

    def get(self, template_id: str) -> Template:
        for t in self._load():
            if t.id == template_id:
                return t
        raise NotFoundError("Template", template_id)

    def save(self, name: str, meal_plan_snapshot: Dict[str, dict],
             slot_registry_snapshot: Dict[str, List[dict]]) -> str:
        name = (name or "").strip() or f"Template {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        template = Template(name, meal_plan_snapshot, slot_registry_snapshot)
        templates = self._load()
        templates.append(template)
        self._write(templates)
        logger.info("Saved template %s (%s) with %d meals", template.id, name, len(template.meal_plan))
        return template.id

    def delete(self, template_id: str) -> None:
        templates = self._load()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            raise NotFoundError("Template", template_id)
        self._write(remaining)
        logger.info("Deleted template %s", template_id)
