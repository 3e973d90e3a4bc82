"""Input models for every action.

Inputs arrive in camelCase (``primaryText``) and are exposed in snake_case
so they map directly onto column names. Explicit ``null`` is rejected:
a field is either omitted or carries a value.
"""

import datetime
from typing import Annotated, Any, ClassVar, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .errors import validation_error
from .sparse_update import NO_FIELDS_MESSAGE

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

# SQLite stores integers as signed 64-bit
MAX_COUNT = 2**63 - 1

Count = Annotated[int, Field(strict=True, ge=0, le=MAX_COUNT)]
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class ActionInput(BaseModel):
    """Base class for action inputs."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value


class UpdateInput(ActionInput):
    """Base class for sparse updates.

    ``key_fields`` identify the row; every other supplied field is written.
    """

    key_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _require_one_field(self):
        if not (self.model_fields_set - set(self.key_fields)):
            raise ValueError(NO_FIELDS_MESSAGE)
        return self


# ==================== Campaigns ====================

class CreateCampaignInput(ActionInput):
    name: NonEmptyStr
    objective: Optional[str] = None
    product_name: Optional[str] = None
    target_audience: Optional[str] = None
    notes: Optional[str] = None


class UpdateCampaignInput(UpdateInput):
    key_fields = ("id",)

    id: NonEmptyStr
    name: Optional[NonEmptyStr] = None
    objective: Optional[str] = None
    product_name: Optional[str] = None
    target_audience: Optional[str] = None
    notes: Optional[str] = None


class ListCampaignsInput(ActionInput):
    pass


# ==================== Ad copies ====================

class CreateAdCopyInput(ActionInput):
    campaign_id: NonEmptyStr
    primary_text: NonEmptyStr
    platform: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    call_to_action: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    url: Optional[str] = None


class UpdateAdCopyInput(UpdateInput):
    key_fields = ("id", "campaign_id")

    id: NonEmptyStr
    campaign_id: NonEmptyStr
    primary_text: Optional[NonEmptyStr] = None
    platform: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    call_to_action: Optional[str] = None
    tone: Optional[str] = None
    variant_label: Optional[str] = None
    url: Optional[str] = None


class AdCopyKeyInput(ActionInput):
    id: NonEmptyStr
    campaign_id: NonEmptyStr


class ListAdCopiesInput(ActionInput):
    campaign_id: NonEmptyStr


# ==================== Performance ====================

class LogAdPerformanceInput(ActionInput):
    ad_copy_id: NonEmptyStr
    date: Optional[datetime.date] = None
    impressions: Optional[Count] = None
    clicks: Optional[Count] = None
    conversions: Optional[Count] = None
    spend: Optional[Amount] = None
    currency: Optional[str] = None
    notes: Optional[str] = None


class ListAdPerformanceInput(ActionInput):
    ad_copy_id: NonEmptyStr


def parse_input(model: type[ActionInput], payload: Any) -> ActionInput:
    """Validate ``payload`` against ``model``.

    Accepts an already-built model instance, a mapping, or None (treated as
    an empty mapping).

    Raises:
        ActionError: BAD_REQUEST describing the first validation error.
    """
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload or {})
    except ValidationError as exc:
        raise validation_error(exc) from exc
