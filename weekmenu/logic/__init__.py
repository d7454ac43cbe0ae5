"""Core business logic layer.

Subpackages:
- shopping: aggregating the plan into a shopping list and merging it with the saved one
- slots: slot label resolution
- export: plain-text rendering of the weekly menu

planner.Planner ties these to the stores and is what the API calls.
"""
__all__ = ["shopping", "slots", "export"]
