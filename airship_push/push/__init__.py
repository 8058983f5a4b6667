"""
Push models shared by every send: device types, message types, campaigns, notification
"""

from .models import (
    DeviceType,
    MessageType,
    DevicePayload,
    Campaigns,
    Notification,
    CampaignsBuilder,
    NotificationBuilder,
    MAX_CAMPAIGN_CATEGORIES,
    MAX_CATEGORY_LENGTH,
)

__all__ = [
    "DeviceType",
    "MessageType",
    "DevicePayload",
    "Campaigns",
    "Notification",
    "CampaignsBuilder",
    "NotificationBuilder",
    "MAX_CAMPAIGN_CATEGORIES",
    "MAX_CATEGORY_LENGTH",
]
