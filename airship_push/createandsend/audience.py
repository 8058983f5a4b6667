"""
Create-and-Send Audience

Email channels defined inline by address. Each channel carries an optional
opt-in timestamp and the per-recipient template substitutions, which are
flattened into the channel object on the wire.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer, model_validator

from ..common.base import WireModel, freeze
from ..common.date_formats import format_datetime

logger = logging.getLogger(__name__)

ADDRESS_KEY = "ua_address"
COMMERCIAL_OPTED_IN_KEY = "ua_commercial_opted_in"
TRANSACTIONAL_OPTED_IN_KEY = "ua_transactional_opted_in"


class EmailChannel(WireModel):
    """A single recipient of a create-and-send email"""
    address: str = Field(..., min_length=1, description="Recipient email address")
    commercial_opted_in: Optional[datetime] = Field(None, description="Commercial opt-in time")
    transactional_opted_in: Optional[datetime] = Field(None, description="Transactional opt-in time")
    substitutions: Dict[str, str] = Field(
        default_factory=dict, validate_default=True, description="Template variable values"
    )

    @field_validator("substitutions")
    @classmethod
    def validate_substitution_keys(cls, v: Dict[str, str]) -> Dict[str, str]:
        for key in v:
            if not key:
                raise ValueError("Substitution keys must be non-empty")
            if key.startswith("ua_"):
                raise ValueError(f"Substitution key '{key}' collides with a reserved channel key")
        return freeze(v)

    @model_validator(mode="after")
    def validate_opt_in(self):
        """At most one opt-in state"""
        if self.commercial_opted_in is not None and self.transactional_opted_in is not None:
            raise ValueError("EmailChannel cannot be both commercial and transactional opted in")
        return self

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {ADDRESS_KEY: self.address}
        if self.commercial_opted_in is not None:
            data[COMMERCIAL_OPTED_IN_KEY] = format_datetime(self.commercial_opted_in)
        if self.transactional_opted_in is not None:
            data[TRANSACTIONAL_OPTED_IN_KEY] = format_datetime(self.transactional_opted_in)
        data.update(self.substitutions)
        return data


class EmailChannels(WireModel):
    """Ordered, non-empty list of email channels"""
    channels: List[EmailChannel] = Field(..., min_length=1)

    @field_validator("channels")
    @classmethod
    def freeze_channels(cls, v: List[EmailChannel]) -> List[EmailChannel]:
        return tuple(v)

    def __len__(self) -> int:
        return len(self.channels)

    @model_serializer
    def serialize_model(self) -> List[Dict[str, Any]]:
        return [channel.model_dump() for channel in self.channels]


class CreateAndSendAudience(WireModel):
    """Audience of a create-and-send: the channels themselves, not a segment"""
    channels: EmailChannels

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        return {"create_and_send": self.channels.model_dump()}


# ====================
# Builders
# ====================

class EmailChannelBuilder:
    """Builder for EmailChannel"""

    def __init__(self):
        self._data: Dict[str, Any] = {"substitutions": {}}

    def with_address(self, address: str) -> "EmailChannelBuilder":
        self._data["address"] = address
        return self

    def with_commercial_opted_in(self, opted_in: datetime) -> "EmailChannelBuilder":
        self._data["commercial_opted_in"] = opted_in
        return self

    def with_transactional_opted_in(self, opted_in: datetime) -> "EmailChannelBuilder":
        self._data["transactional_opted_in"] = opted_in
        return self

    def add_substitution(self, key: str, value: str) -> "EmailChannelBuilder":
        self._data["substitutions"][key] = value
        return self

    def add_all_substitutions(self, substitutions: Dict[str, str]) -> "EmailChannelBuilder":
        self._data["substitutions"].update(substitutions)
        return self

    def build(self) -> EmailChannel:
        data = dict(self._data)
        data["substitutions"] = dict(self._data["substitutions"])
        return EmailChannel(**data)


class EmailChannelsBuilder:
    """Builder for EmailChannels"""

    def __init__(self):
        self._channels: List[EmailChannel] = []

    def add_channel(self, channel: EmailChannel) -> "EmailChannelsBuilder":
        self._channels.append(channel)
        return self

    def add_all_channels(self, channels: List[EmailChannel]) -> "EmailChannelsBuilder":
        self._channels.extend(channels)
        return self

    def build(self) -> EmailChannels:
        channels = EmailChannels(channels=list(self._channels))
        logger.debug(f"Built create-and-send channel list with {len(channels)} channels")
        return channels
