"""
Push Models

Device types, message types, campaign categories and the notification
object that carries per-device-type payload overrides.
"""

import logging
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer, model_validator

from ..common.base import WireModel, freeze

logger = logging.getLogger(__name__)

MAX_CAMPAIGN_CATEGORIES = 10
MAX_CATEGORY_LENGTH = 64


# ====================
# Enums
# ====================

class DeviceType(str, Enum):
    """Device type tags used as notification override keys"""
    IOS = "ios"
    ANDROID = "android"
    AMAZON = "amazon"
    WEB = "web"
    EMAIL = "email"
    SMS = "sms"


class MessageType(str, Enum):
    """Email message category"""
    COMMERCIAL = "commercial"
    TRANSACTIONAL = "transactional"


# ====================
# Models
# ====================

class DevicePayload(WireModel):
    """Base for payloads that override a notification on one device type"""
    device_type: ClassVar[DeviceType]


class Campaigns(WireModel):
    """Campaign categories attached to a send"""
    categories: List[str] = Field(..., description="Ordered category names")

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Campaigns must contain at least one category")
        if len(v) > MAX_CAMPAIGN_CATEGORIES:
            raise ValueError(f"Campaigns may contain at most {MAX_CAMPAIGN_CATEGORIES} categories, got {len(v)}")
        for category in v:
            if not category:
                raise ValueError("Campaign categories must be non-empty")
            if len(category) > MAX_CATEGORY_LENGTH:
                raise ValueError(
                    f"Campaign category '{category}' is longer than {MAX_CATEGORY_LENGTH} characters"
                )
        return tuple(v)

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        return {"categories": list(self.categories)}


class Notification(WireModel):
    """Notification with an optional generic alert and device type overrides"""
    alert: Optional[str] = None
    device_type_overrides: Dict[DeviceType, DevicePayload] = Field(default_factory=dict, validate_default=True)

    @field_validator("device_type_overrides")
    @classmethod
    def freeze_overrides(cls, v: Dict[DeviceType, DevicePayload]) -> Dict[DeviceType, DevicePayload]:
        return freeze(v)

    @model_validator(mode="after")
    def validate_content(self):
        if self.alert is None and not self.device_type_overrides:
            raise ValueError("Notification requires an alert or at least one device type override")
        for device_type, payload in self.device_type_overrides.items():
            if payload.device_type != device_type:
                raise ValueError(
                    f"Payload for {payload.device_type.value} cannot override {device_type.value}"
                )
        return self

    @property
    def device_types(self) -> List[DeviceType]:
        """Device types with an override, in insertion order"""
        return list(self.device_type_overrides)

    def get_override(self, device_type: DeviceType) -> Optional[DevicePayload]:
        return self.device_type_overrides.get(device_type)

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.alert is not None:
            data["alert"] = self.alert
        for device_type, payload in self.device_type_overrides.items():
            data[device_type.value] = payload.model_dump()
        return data


# ====================
# Builders
# ====================

class CampaignsBuilder:
    """Builder for Campaigns"""

    def __init__(self):
        self._data = {"categories": []}

    def add_category(self, category: str) -> "CampaignsBuilder":
        self._data["categories"].append(category)
        return self

    def add_all_categories(self, categories: List[str]) -> "CampaignsBuilder":
        self._data["categories"].extend(categories)
        return self

    def build(self) -> Campaigns:
        return Campaigns(categories=list(self._data["categories"]))


class NotificationBuilder:
    """Builder for Notification"""

    def __init__(self):
        self._data = {"alert": None, "device_type_overrides": {}}

    def with_alert(self, alert: str) -> "NotificationBuilder":
        self._data["alert"] = alert
        return self

    def add_device_type_override(
        self,
        device_type: DeviceType,
        payload: DevicePayload
    ) -> "NotificationBuilder":
        self._data["device_type_overrides"][device_type] = payload
        return self

    def build(self) -> Notification:
        notification = Notification(
            alert=self._data["alert"],
            device_type_overrides=dict(self._data["device_type_overrides"]),
        )
        logger.debug(f"Built notification for device types {[d.value for d in notification.device_types]}")
        return notification
