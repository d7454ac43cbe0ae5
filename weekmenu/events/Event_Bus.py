"""Simple Event Bus / Observer implementation for planner changes.

Event names:
  plan.updated         -> {"key": str, "action": str}
  plan.cleared         -> {}
  slot.added           -> {"day": str, "slot": str, "label": str}
  slot.removed         -> {"day": str, "slot": str, "meal_deleted": bool}
  shopping.generated   -> {"count": int, "kept": int, "orphans": int}
  shopping.cleared     -> {}
  template.saved       -> {"id": str, "name": str}
  template.applied     -> {"id": str, "name": str, "materialized": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

PLAN_UPDATED = "plan.updated"
PLAN_CLEARED = "plan.cleared"
SLOT_ADDED = "slot.added"
SLOT_REMOVED = "slot.removed"
SHOPPING_GENERATED = "shopping.generated"
SHOPPING_CLEARED = "shopping.cleared"
TEMPLATE_SAVED = "template.saved"
TEMPLATE_APPLIED = "template.applied"

ALL_EVENTS = (PLAN_UPDATED, PLAN_CLEARED, SLOT_ADDED, SLOT_REMOVED,
              SHOPPING_GENERATED, SHOPPING_CLEARED, TEMPLATE_SAVED, TEMPLATE_APPLIED)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		# A failing listener must not undo a mutation that already happened
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS', 'PLAN_UPDATED', 'PLAN_CLEARED',
           'SLOT_ADDED', 'SLOT_REMOVED', 'SHOPPING_GENERATED', 'SHOPPING_CLEARED',
           'TEMPLATE_SAVED', 'TEMPLATE_APPLIED']
