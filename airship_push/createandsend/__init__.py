"""
Create-and-send: inline email audiences, email payloads and templates
"""

from .audience import (
    EmailChannel,
    EmailChannels,
    CreateAndSendAudience,
    EmailChannelBuilder,
    EmailChannelsBuilder,
)
from .email import (
    EmailFields,
    EmailTemplate,
    CreateAndSendEmailPayload,
    EmailFieldsBuilder,
    EmailTemplateBuilder,
    CreateAndSendEmailPayloadBuilder,
)
from .payload import CreateAndSendPayload, CreateAndSendPayloadBuilder
from .request import CreateAndSendRequest, CREATE_AND_SEND_PATH, VALIDATE_PATH

__all__ = [
    "EmailChannel",
    "EmailChannels",
    "CreateAndSendAudience",
    "EmailChannelBuilder",
    "EmailChannelsBuilder",
    "EmailFields",
    "EmailTemplate",
    "CreateAndSendEmailPayload",
    "EmailFieldsBuilder",
    "EmailTemplateBuilder",
    "CreateAndSendEmailPayloadBuilder",
    "CreateAndSendPayload",
    "CreateAndSendPayloadBuilder",
    "CreateAndSendRequest",
    "CREATE_AND_SEND_PATH",
    "VALIDATE_PATH",
]
