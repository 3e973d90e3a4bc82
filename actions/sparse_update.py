"""Sparse-update merge.

Builds an UPDATE payload from a partial input model: only the fields the
caller actually sent are included, plus a fresh ``updated_at``. A field
that was omitted is never written, so its stored value is left untouched.
Presence is taken from pydantic's ``model_fields_set``, which tells an
omitted field apart from one sent with an empty string.
"""

from datetime import datetime
from typing import Any, Iterable

from pydantic import BaseModel

NO_FIELDS_MESSAGE = "At least one field must be provided to update"


def supplied_fields(payload: BaseModel, exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Return ``{field_name: value}`` for every explicitly supplied field."""
    skip = set(exclude)
    return {
        name: getattr(payload, name)
        for name in payload.model_fields_set
        if name not in skip
    }


def build_update(payload: BaseModel, now: datetime, exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Build the column mapping for a sparse update.

    Args:
        payload: Validated input model.
        now: Timestamp written to ``updated_at``.
        exclude: Fields that identify the row rather than change it.

    Returns:
        Supplied fields keyed by column name, plus ``updated_at``.

    Raises:
        ValueError: If no field other than ``exclude`` was supplied.
    """
    values = supplied_fields(payload, exclude)
    if not values:
        raise ValueError(NO_FIELDS_MESSAGE)
    values["updated_at"] = now
    return values
