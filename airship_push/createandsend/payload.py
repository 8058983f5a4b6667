"""
Create-and-Send Payload

Audience, notification and optional campaigns of a create-and-send. The
``device_types`` list on the wire is taken from the notification overrides.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import model_serializer, model_validator

from ..common.base import WireModel
from ..push.models import Campaigns, Notification
from .audience import CreateAndSendAudience

logger = logging.getLogger(__name__)


class CreateAndSendPayload(WireModel):
    """Body of a create-and-send request"""
    audience: CreateAndSendAudience
    notification: Notification
    campaigns: Optional[Campaigns] = None

    @model_validator(mode="after")
    def validate_device_types(self):
        if not self.notification.device_types:
            raise ValueError("Create-and-send notification requires at least one device type override")
        return self

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "audience": self.audience.model_dump(),
            "device_types": [device_type.value for device_type in self.notification.device_types],
            "notification": self.notification.model_dump(),
        }
        if self.campaigns is not None:
            data["campaigns"] = self.campaigns.model_dump()
        return data


class CreateAndSendPayloadBuilder:
    """Builder for CreateAndSendPayload"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_audience(self, audience: CreateAndSendAudience) -> "CreateAndSendPayloadBuilder":
        self._data["audience"] = audience
        return self

    def with_notification(self, notification: Notification) -> "CreateAndSendPayloadBuilder":
        self._data["notification"] = notification
        return self

    def with_campaigns(self, campaigns: Campaigns) -> "CreateAndSendPayloadBuilder":
        self._data["campaigns"] = campaigns
        return self

    def build(self) -> CreateAndSendPayload:
        payload = CreateAndSendPayload(**self._data)
        logger.debug(
            f"Built create-and-send payload for {len(payload.audience.channels)} channels"
        )
        return payload
