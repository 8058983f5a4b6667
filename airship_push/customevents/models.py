"""
Custom Event Models

Application-reported user actions: who did it (a channel or named user),
what happened (event name, value, open-ended properties) and when.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import Field, JsonValue, field_validator, model_serializer

from ..common.base import WireModel, freeze, thaw
from ..common.date_formats import format_datetime

logger = logging.getLogger(__name__)


def to_json_number(value: Decimal) -> Union[int, float]:
    """
    JSON number for a Decimal

    Integral values come out as ``int`` and keep every digit. Fractional
    values go through ``float``, so anything past double precision is rounded.
    """
    if not value.is_finite():
        raise ValueError(f"{value} is not a finite number")
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_json_value(value: Any) -> Any:
    """Plain JSON tree from tuples, mappings and Decimals; rejects NaN/infinity"""
    if isinstance(value, Mapping):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, Decimal):
        return to_json_number(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value} is not a valid JSON number")
    return value


class CustomEventChannelType(str, Enum):
    """Identifier kind of the user who triggered the event"""
    IOS_CHANNEL = "ios_channel"
    ANDROID_CHANNEL = "android_channel"
    AMAZON_CHANNEL = "amazon_channel"
    WEB_CHANNEL = "web_channel"
    NAMED_USER_ID = "named_user_id"
    GENERIC_CHANNEL = "channel"


class CustomEventUser(WireModel):
    """Single channel type / identifier pair"""
    channel_type: CustomEventChannelType
    channel: str = Field(..., min_length=1)

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        return {self.channel_type.value: self.channel}


class CustomEventBody(WireModel):
    """
    What happened

    ``properties`` takes any JSON value per key, nested maps and lists
    included, and is sent unchanged. Tuples are sent as arrays and Decimals
    as numbers. ``session_id`` is always present on the wire, as null when
    unset.
    """
    name: str = Field(..., min_length=1, description="Event name")
    value: Optional[Decimal] = Field(None, allow_inf_nan=False, description="Monetary or numeric value")
    transaction: Optional[str] = None
    interaction_id: Optional[str] = None
    interaction_type: Optional[str] = None
    properties: Dict[str, JsonValue] = Field(default_factory=dict, validate_default=True)
    session_id: Optional[str] = None

    @field_validator("properties", mode="before")
    @classmethod
    def normalize_properties(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return to_json_value(v)
        return v

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, v: Dict[str, JsonValue]) -> Dict[str, JsonValue]:
        return freeze(v)

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.value is not None:
            data["value"] = to_json_number(self.value)
        if self.transaction is not None:
            data["transaction"] = self.transaction
        if self.interaction_id is not None:
            data["interaction_id"] = self.interaction_id
        if self.interaction_type is not None:
            data["interaction_type"] = self.interaction_type
        if self.properties:
            data["properties"] = thaw(self.properties)
        data["session_id"] = self.session_id
        return data


class CustomEventPayload(WireModel):
    """A custom event as accepted by the custom events endpoint"""
    body: CustomEventBody
    user: CustomEventUser
    occurred: datetime = Field(..., description="When the event happened, sent as UTC")

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        return {
            "occurred": format_datetime(self.occurred),
            "user": self.user.model_dump(),
            "body": self.body.model_dump(),
        }


# ====================
# Builders
# ====================

class CustomEventUserBuilder:
    """Builder for CustomEventUser"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_channel_type(self, channel_type: CustomEventChannelType) -> "CustomEventUserBuilder":
        self._data["channel_type"] = channel_type
        return self

    def with_channel(self, channel: str) -> "CustomEventUserBuilder":
        self._data["channel"] = channel
        return self

    def build(self) -> CustomEventUser:
        return CustomEventUser(**self._data)


class CustomEventBodyBuilder:
    """Builder for CustomEventBody"""

    def __init__(self):
        self._data: Dict[str, Any] = {"properties": {}}

    def with_name(self, name: str) -> "CustomEventBodyBuilder":
        self._data["name"] = name
        return self

    def with_value(self, value: Decimal) -> "CustomEventBodyBuilder":
        self._data["value"] = value
        return self

    def with_transaction(self, transaction: str) -> "CustomEventBodyBuilder":
        self._data["transaction"] = transaction
        return self

    def with_interaction_id(self, interaction_id: str) -> "CustomEventBodyBuilder":
        self._data["interaction_id"] = interaction_id
        return self

    def with_interaction_type(self, interaction_type: str) -> "CustomEventBodyBuilder":
        self._data["interaction_type"] = interaction_type
        return self

    def with_session_id(self, session_id: str) -> "CustomEventBodyBuilder":
        self._data["session_id"] = session_id
        return self

    def add_property_entry(self, key: str, value: Any) -> "CustomEventBodyBuilder":
        self._data["properties"][key] = value
        return self

    def add_all_property_entries(self, properties: Dict[str, Any]) -> "CustomEventBodyBuilder":
        self._data["properties"].update(properties)
        return self

    def build(self) -> CustomEventBody:
        data = dict(self._data)
        data["properties"] = dict(self._data["properties"])
        return CustomEventBody(**data)


class CustomEventPayloadBuilder:
    """Builder for CustomEventPayload"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_body(self, body: CustomEventBody) -> "CustomEventPayloadBuilder":
        self._data["body"] = body
        return self

    def with_user(self, user: CustomEventUser) -> "CustomEventPayloadBuilder":
        self._data["user"] = user
        return self

    def with_occurred(self, occurred: datetime) -> "CustomEventPayloadBuilder":
        self._data["occurred"] = occurred
        return self

    def build(self) -> CustomEventPayload:
        payload = CustomEventPayload(**self._data)
        logger.debug(f"Built custom event '{payload.body.name}' for {payload.user.channel_type.value}")
        return payload
