"""
Unit Tests for Create-and-Send Email

The HTTP client has its own tests; here we check the JSON body that is
handed to the client before sending, and the build-time validation rules.
"""

import pytest
from pydantic import ValidationError

from airship_push import parse, serialize
from airship_push.createandsend import (
    CreateAndSendAudience,
    CreateAndSendEmailPayload,
    CreateAndSendPayloadBuilder,
    CreateAndSendRequest,
    EmailChannelBuilder,
    EmailChannelsBuilder,
    EmailFieldsBuilder,
    EmailTemplate,
    EmailTemplateBuilder,
)
from airship_push.push import (
    CampaignsBuilder,
    DeviceType,
    MessageType,
    NotificationBuilder,
)

pytestmark = pytest.mark.unit

TEMPLATE_PLAINTEXT = (
    "Hope you're enjoying our store in {{location}} "
    "[[ua-unsubscribe href=\"http://unsubscribe.urbanairship.com/email/success.html\"]]"
)

EXPECTED_EMAIL_PAYLOAD = r'''{
    "subject": "Welcome to the Winter Sale! ",
    "html_body": "<h1>Seasons Greetings</h1><p>Check out our winter deals!</p><p><a data-ua-unsubscribe=\"1\" title=\"unsubscribe\" href=\"http://unsubscribe.urbanairship.com/email/success.html\">Unsubscribe</a></p>",
    "plaintext_body": "Greetings! Check out our latest winter deals! [[ua-unsubscribe href=\"http://unsubscribe.urbanairship.com/email/success.html\"]]",
    "message_type": "commercial",
    "sender_name": "Urban Airship",
    "sender_address": "team@urbanairship.com",
    "reply_to": "no-reply@urbanairship.com"
}'''


@pytest.fixture
def notification(email_payload):
    return NotificationBuilder().add_device_type_override(DeviceType.EMAIL, email_payload).build()


@pytest.fixture
def campaigns():
    return CampaignsBuilder().add_category("winter sale").add_category("west coast").build()


@pytest.fixture
def payload(audience, notification, campaigns):
    return (
        CreateAndSendPayloadBuilder()
        .with_audience(audience)
        .with_notification(notification)
        .with_campaigns(campaigns)
        .build()
    )


@pytest.fixture
def template_payload(sender_builder):
    template = (
        EmailTemplateBuilder()
        .with_email_fields(
            EmailFieldsBuilder()
            .with_subject("Hi there, {{name}}")
            .with_plaintext_body(TEMPLATE_PLAINTEXT)
            .build()
        )
        .build()
    )

    new_channel = (
        EmailChannelBuilder()
        .with_address("new@email.com")
        .add_substitution("name", "New Person Esq")
        .add_substitution("location", "City, State")
        .build()
    )
    ben_channel = (
        EmailChannelBuilder()
        .with_address("ben@icetown.com")
        .add_substitution("name", "Ben Wyatt")
        .add_substitution("location", "Pawnee, IN")
        .build()
    )
    audience = CreateAndSendAudience(
        channels=EmailChannelsBuilder().add_channel(new_channel).add_channel(ben_channel).build()
    )

    email = sender_builder().with_email_template(template).build()
    notification = NotificationBuilder().add_device_type_override(DeviceType.EMAIL, email).build()

    return (
        CreateAndSendPayloadBuilder()
        .with_audience(audience)
        .with_notification(notification)
        .build()
    )


# ====================
# Serialization
# ====================

class TestEmailChannelSerialization:
    """Email channel wire shape"""

    def test_commercial_opted_in_channel(self, new_channel, assert_json_equal):
        expected = '''{
            "ua_address": "new@email.com",
            "ua_commercial_opted_in": "2018-11-29T10:34:22"}'''
        assert_json_equal(new_channel, expected)

    def test_transactional_opted_in_channel(self, ben_channel, assert_json_equal):
        expected = '''{
            "ua_address": "ben@icetown.com",
            "ua_transactional_opted_in": "2018-11-29T12:45:10"}'''
        assert_json_equal(ben_channel, expected)

    def test_substitutions_flatten_into_channel(self, assert_json_equal):
        channel = (
            EmailChannelBuilder()
            .with_address("new@email.com")
            .add_all_substitutions({"name": "New Person Esq", "location": "City, State"})
            .build()
        )
        expected = '{"ua_address": "new@email.com", "name": "New Person Esq", "location": "City, State"}'
        assert_json_equal(channel, expected)


class TestAudienceSerialization:
    """Create-and-send audience wire shape"""

    def test_new_audience(self, audience, assert_json_equal):
        expected = (
            '{"create_and_send":[{"ua_address":"new@email.com","ua_commercial_opted_in":"2018-11-29T10:34:22"},'
            '{"ua_address":"ben@icetown.com","ua_transactional_opted_in":"2018-11-29T12:45:10"}]}'
        )
        assert_json_equal(audience, expected)

    def test_audience_preserves_add_order(self, new_channel, ben_channel):
        channels = EmailChannelsBuilder().add_channel(ben_channel).add_channel(new_channel).build()
        tree = parse(serialize(CreateAndSendAudience(channels=channels)))
        addresses = [channel["ua_address"] for channel in tree["create_and_send"]]
        assert addresses == ["ben@icetown.com", "new@email.com"]


class TestEmailPayloadSerialization:
    """Email payload and notification wire shape"""

    def test_email_payload(self, email_payload, assert_json_equal):
        assert_json_equal(email_payload, EXPECTED_EMAIL_PAYLOAD)

    def test_notification(self, notification, assert_json_equal):
        assert_json_equal(notification, '{"email": ' + EXPECTED_EMAIL_PAYLOAD + '}')

    def test_unset_optional_fields_are_omitted(self):
        email = CreateAndSendEmailPayload(
            subject="subject",
            plaintext_body="body",
            message_type=MessageType.TRANSACTIONAL,
            sender_name="Urban Airship",
            sender_address="team@urbanairship.com",
        )
        tree = parse(serialize(email))
        assert tree == {
            "subject": "subject",
            "plaintext_body": "body",
            "message_type": "transactional",
            "sender_name": "Urban Airship",
            "sender_address": "team@urbanairship.com",
        }

    def test_template_by_reference(self, sender_builder):
        template = EmailTemplateBuilder().with_template_id("tpl-1").build()
        email = sender_builder().with_email_template(template).build()
        tree = parse(serialize(email))
        assert tree["template"] == {"template_id": "tpl-1"}
        assert "subject" not in tree


class TestCreateAndSendPayloadSerialization:
    """Full create-and-send body"""

    def test_create_and_send_email_payload(self, payload, assert_json_equal):
        expected = r'''{
            "audience": {
                "create_and_send": [{
                        "ua_address": "new@email.com",
                        "ua_commercial_opted_in": "2018-11-29T10:34:22"
                    },
                    {
                        "ua_address": "ben@icetown.com",
                        "ua_transactional_opted_in": "2018-11-29T12:45:10"
                    }
                ]
            },
            "device_types": ["email"],
            "notification": {
                "email": {
                    "subject": "Welcome to the Winter Sale! ",
                    "html_body": "<h1>Seasons Greetings</h1><p>Check out our winter deals!</p><p><a data-ua-unsubscribe=\"1\" title=\"unsubscribe\" href=\"http://unsubscribe.urbanairship.com/email/success.html\">Unsubscribe</a></p>",
                    "plaintext_body": "Greetings! Check out our latest winter deals! [[ua-unsubscribe href=\"http://unsubscribe.urbanairship.com/email/success.html\"]]",
                    "message_type": "commercial",
                    "sender_name": "Urban Airship",
                    "sender_address": "team@urbanairship.com",
                    "reply_to": "no-reply@urbanairship.com"
                }
            },
            "campaigns": {
                "categories": ["winter sale", "west coast"]
            }
        }'''
        assert_json_equal(payload, expected)

    def test_create_and_send_email_template(self, template_payload, assert_json_equal):
        expected = r'''{
            "audience": {
                "create_and_send": [
                    {
                        "ua_address": "new@email.com",
                        "name": "New Person Esq",
                        "location": "City, State"
                    },
                    {
                        "ua_address": "ben@icetown.com",
                        "name": "Ben Wyatt",
                        "location": "Pawnee, IN"
                    }
                ]
            },
            "device_types": [
                "email"
            ],
            "notification": {
                "email": {
                    "message_type": "commercial",
                    "sender_name": "Urban Airship",
                    "sender_address": "team@urbanairship.com",
                    "reply_to": "no-reply@urbanairship.com",
                    "template": {
                        "fields": {
                            "plaintext_body": "Hope you're enjoying our store in {{location}} [[ua-unsubscribe href=\"http://unsubscribe.urbanairship.com/email/success.html\"]]",
                            "subject": "Hi there, {{name}}"
                        }
                    }
                }
            }
        }'''
        assert_json_equal(template_payload, expected)

    def test_serialization_is_idempotent(self, payload):
        assert parse(serialize(payload)) == parse(serialize(payload))

    def test_request_body_matches_payload(self, payload):
        request = CreateAndSendRequest.new_request(payload)
        assert parse(request.get_request_body()) == parse(serialize(payload))


# ====================
# Validation
# ====================

class TestEmailTemplateValidation:
    """A template is a template id or inline fields, exactly one"""

    def test_template_id_and_fields_both_set(self):
        with pytest.raises(ValidationError, match="both template_id and email_fields"):
            (
                EmailTemplateBuilder()
                .with_template_id("templateId")
                .with_email_fields(
                    EmailFieldsBuilder()
                    .with_plaintext_body("plainText")
                    .with_subject("subject")
                    .build()
                )
                .build()
            )

    def test_template_id_and_fields_both_unset(self):
        with pytest.raises(ValidationError, match="requires either template_id or email_fields"):
            EmailTemplateBuilder().build()

    def test_template_id_only(self):
        template = EmailTemplate(template_id="template_id")
        assert template.is_reference

    def test_fields_only(self):
        fields = EmailFieldsBuilder().with_subject("subject").with_plaintext_body("body").build()
        template = EmailTemplate(email_fields=fields)
        assert not template.is_reference

    def test_template_serializes_under_template_key(self):
        by_id = EmailTemplate(template_id="template_id")
        assert parse(serialize(by_id)) == {"template": {"template_id": "template_id"}}

        fields = EmailFieldsBuilder().with_subject("subject").with_plaintext_body("body").build()
        inline = EmailTemplate(email_fields=fields)
        assert parse(serialize(inline)) == {"template": {"fields": {"subject": "subject", "plaintext_body": "body"}}}

    def test_fields_require_subject_and_plaintext(self):
        with pytest.raises(ValidationError):
            EmailFieldsBuilder().with_subject("subject").build()
        with pytest.raises(ValidationError):
            EmailFieldsBuilder().with_plaintext_body("body").build()


class TestEmailPayloadValidation:
    """Content comes from a template or from inline fields"""

    @pytest.fixture
    def template(self):
        return EmailTemplateBuilder().with_template_id("template_id").build()

    def test_subject_and_template_set(self, sender_builder, template):
        with pytest.raises(ValidationError, match="cannot also set subject"):
            (
                sender_builder()
                .with_subject("Welcome to the Winter Sale!")
                .with_plaintext_body(TEMPLATE_PLAINTEXT)
                .with_email_template(template)
                .build()
            )

    def test_plaintext_and_template_set(self, sender_builder, template):
        with pytest.raises(ValidationError, match="cannot also set plaintext_body"):
            sender_builder().with_plaintext_body(TEMPLATE_PLAINTEXT).with_email_template(template).build()

    def test_html_body_and_template_set(self, sender_builder, template):
        with pytest.raises(ValidationError, match="cannot also set html_body"):
            sender_builder().with_html_body("body").with_email_template(template).build()

    def test_subject_and_template_unset(self, sender_builder):
        with pytest.raises(ValidationError, match="requires subject"):
            sender_builder().with_plaintext_body(TEMPLATE_PLAINTEXT).build()

    def test_plaintext_and_template_unset(self, sender_builder):
        with pytest.raises(ValidationError, match="requires plaintext_body"):
            sender_builder().with_subject("subject").build()

    def test_empty_inline_subject_rejected(self, sender_builder):
        with pytest.raises(ValidationError):
            sender_builder().with_subject("").with_plaintext_body("body").build()

    def test_empty_inline_plaintext_rejected(self, sender_builder):
        with pytest.raises(ValidationError):
            sender_builder().with_subject("subject").with_plaintext_body("").build()

    def test_html_body_is_optional(self, sender_builder):
        email = sender_builder().with_subject("subject").with_plaintext_body("body").build()
        assert email.html_body is None

    def test_template_without_inline_content(self, sender_builder, template):
        email = sender_builder().with_email_template(template).build()
        assert email.email_template == template

    def test_sender_fields_required(self):
        with pytest.raises(ValidationError):
            CreateAndSendEmailPayload(
                subject="subject",
                plaintext_body="body",
                message_type=MessageType.COMMERCIAL,
            )

    def test_payload_is_immutable(self, email_payload):
        with pytest.raises(ValidationError):
            email_payload.subject = "changed"


class TestCreateAndSendPayloadValidation:
    """Payload-level rules"""

    def test_audience_required(self, notification):
        with pytest.raises(ValidationError):
            CreateAndSendPayloadBuilder().with_notification(notification).build()

    def test_notification_without_override_rejected(self, audience):
        notification = NotificationBuilder().with_alert("hello").build()
        with pytest.raises(ValidationError, match="at least one device type override"):
            CreateAndSendPayloadBuilder().with_audience(audience).with_notification(notification).build()

    def test_campaigns_optional(self, audience, notification):
        payload = CreateAndSendPayloadBuilder().with_audience(audience).with_notification(notification).build()
        assert "campaigns" not in parse(serialize(payload))
