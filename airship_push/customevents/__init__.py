"""
Custom events: user, body and payload models plus the request that reports them
"""

from .models import (
    CustomEventChannelType,
    CustomEventUser,
    CustomEventBody,
    CustomEventPayload,
    CustomEventUserBuilder,
    CustomEventBodyBuilder,
    CustomEventPayloadBuilder,
)
from .request import CustomEventRequest, CUSTOM_EVENTS_PATH, MAX_EVENTS_PER_REQUEST

__all__ = [
    "CustomEventChannelType",
    "CustomEventUser",
    "CustomEventBody",
    "CustomEventPayload",
    "CustomEventUserBuilder",
    "CustomEventBodyBuilder",
    "CustomEventPayloadBuilder",
    "CustomEventRequest",
    "CUSTOM_EVENTS_PATH",
    "MAX_EVENTS_PER_REQUEST",
]
