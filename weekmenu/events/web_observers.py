"""Web-facing observers for planner events.

Subscribes to every planner event on the GLOBAL_EVENT_BUS and keeps a small
in-memory ring buffer the API exposes at /api/events, so open pages can poll
for changes made from another tab (since=<last id seen>).
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            evt.update({k: v for k, v in payload.items() if isinstance(v, (str, int, float, bool))})
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus=GLOBAL_EVENT_BUS):
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in ALL_EVENTS:
        bus.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), plus the cursor to poll with next."""
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
