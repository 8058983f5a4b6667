"""
Create-and-Send Email Payload

The email override of a create-and-send notification. Content comes from
exactly one source: inline subject/body fields on the payload, or an
EmailTemplate (a stored template id, or inline template fields with
``{{variable}}`` placeholders filled from each channel's substitutions).
"""

import logging
from typing import Any, ClassVar, Dict, Optional

from pydantic import Field, model_serializer, model_validator

from ..common.base import WireModel
from ..push.models import DevicePayload, DeviceType, MessageType

logger = logging.getLogger(__name__)


class EmailFields(WireModel):
    """Inline template content"""
    subject: str = Field(..., min_length=1)
    plaintext_body: str = Field(..., min_length=1)
    html_body: Optional[str] = None

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"subject": self.subject}
        if self.html_body is not None:
            data["html_body"] = self.html_body
        data["plaintext_body"] = self.plaintext_body
        return data


class EmailTemplate(WireModel):
    """
    Template reference: a template id or inline fields, never both

    Serializes as ``{"template": {"template_id": ...}}`` or
    ``{"template": {"fields": {...}}}``; the email payload merges that object
    into its own.
    """
    template_id: Optional[str] = None
    email_fields: Optional[EmailFields] = None

    @model_validator(mode="after")
    def validate_source(self):
        if self.template_id is not None and self.email_fields is not None:
            raise ValueError("EmailTemplate cannot have both template_id and email_fields set")
        if self.template_id is None and self.email_fields is None:
            raise ValueError("EmailTemplate requires either template_id or email_fields")
        return self

    @property
    def is_reference(self) -> bool:
        return self.template_id is not None

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        if self.template_id is not None:
            return {"template": {"template_id": self.template_id}}
        return {"template": {"fields": self.email_fields.model_dump()}}


class CreateAndSendEmailPayload(DevicePayload):
    """Email payload for a create-and-send notification"""
    device_type: ClassVar[DeviceType] = DeviceType.EMAIL

    subject: Optional[str] = Field(None, min_length=1)
    html_body: Optional[str] = None
    plaintext_body: Optional[str] = Field(None, min_length=1)
    message_type: MessageType
    sender_name: str = Field(..., min_length=1)
    sender_address: str = Field(..., min_length=1)
    reply_to: Optional[str] = None
    email_template: Optional[EmailTemplate] = None

    @model_validator(mode="after")
    def validate_content_source(self):
        """Content comes from the template or from the inline fields, not both"""
        if self.email_template is not None:
            inline = [
                name for name in ("subject", "html_body", "plaintext_body")
                if getattr(self, name) is not None
            ]
            if inline:
                raise ValueError(
                    f"CreateAndSendEmailPayload with an email template cannot also set {', '.join(inline)}"
                )
            return self

        if self.subject is None:
            raise ValueError("CreateAndSendEmailPayload requires subject when no email template is set")
        if self.plaintext_body is None:
            raise ValueError("CreateAndSendEmailPayload requires plaintext_body when no email template is set")
        return self

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.subject is not None:
            data["subject"] = self.subject
        if self.html_body is not None:
            data["html_body"] = self.html_body
        if self.plaintext_body is not None:
            data["plaintext_body"] = self.plaintext_body
        data["message_type"] = self.message_type.value
        data["sender_name"] = self.sender_name
        data["sender_address"] = self.sender_address
        if self.reply_to is not None:
            data["reply_to"] = self.reply_to
        if self.email_template is not None:
            data.update(self.email_template.model_dump())
        return data


# ====================
# Builders
# ====================

class EmailFieldsBuilder:
    """Builder for EmailFields"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_subject(self, subject: str) -> "EmailFieldsBuilder":
        self._data["subject"] = subject
        return self

    def with_plaintext_body(self, plaintext_body: str) -> "EmailFieldsBuilder":
        self._data["plaintext_body"] = plaintext_body
        return self

    def with_html_body(self, html_body: str) -> "EmailFieldsBuilder":
        self._data["html_body"] = html_body
        return self

    def build(self) -> EmailFields:
        return EmailFields(**self._data)


class EmailTemplateBuilder:
    """Builder for EmailTemplate"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_template_id(self, template_id: str) -> "EmailTemplateBuilder":
        self._data["template_id"] = template_id
        return self

    def with_email_fields(self, email_fields: EmailFields) -> "EmailTemplateBuilder":
        self._data["email_fields"] = email_fields
        return self

    def build(self) -> EmailTemplate:
        return EmailTemplate(**self._data)


class CreateAndSendEmailPayloadBuilder:
    """Builder for CreateAndSendEmailPayload"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def with_subject(self, subject: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["subject"] = subject
        return self

    def with_html_body(self, html_body: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["html_body"] = html_body
        return self

    def with_plaintext_body(self, plaintext_body: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["plaintext_body"] = plaintext_body
        return self

    def with_message_type(self, message_type: MessageType) -> "CreateAndSendEmailPayloadBuilder":
        self._data["message_type"] = message_type
        return self

    def with_sender_name(self, sender_name: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["sender_name"] = sender_name
        return self

    def with_sender_address(self, sender_address: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["sender_address"] = sender_address
        return self

    def with_reply_to(self, reply_to: str) -> "CreateAndSendEmailPayloadBuilder":
        self._data["reply_to"] = reply_to
        return self

    def with_email_template(self, email_template: EmailTemplate) -> "CreateAndSendEmailPayloadBuilder":
        self._data["email_template"] = email_template
        return self

    def build(self) -> CreateAndSendEmailPayload:
        payload = CreateAndSendEmailPayload(**self._data)
        logger.debug(
            f"Built {payload.message_type.value} email payload "
            f"({'template' if payload.email_template else 'inline content'})"
        )
        return payload
