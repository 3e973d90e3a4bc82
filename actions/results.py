"""Result envelope shared by every action."""

from typing import Any


def action_result(**data: Any) -> dict[str, Any]:
    """Wrap ``data`` in the success envelope: ``{"success": True, "data": {...}}``."""
    return {"success": True, "data": data}


def list_result(items: list) -> dict[str, Any]:
    """Success envelope for list actions: items plus their count."""
    return action_result(items=items, total=len(items))


def ok() -> dict[str, Any]:
    """Success envelope for actions that return no data."""
    return {"success": True}
