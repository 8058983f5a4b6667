"""
Unit Test Fixtures

Shared channels, email content and timestamps used across the payload tests.
"""
from datetime import datetime

import pytest

from airship_push.createandsend import (
    CreateAndSendAudience,
    CreateAndSendEmailPayloadBuilder,
    EmailChannelBuilder,
    EmailChannelsBuilder,
)
from airship_push.push import MessageType

HTML_BODY = (
    "<h1>Seasons Greetings</h1><p>Check out our winter deals!</p><p><a data-ua-unsubscribe=\"1\" "
    "title=\"unsubscribe\" href=\"http://unsubscribe.urbanairship.com/email/success.html\">Unsubscribe</a></p>"
)
PLAINTEXT_BODY = (
    "Greetings! Check out our latest winter deals! "
    "[[ua-unsubscribe href=\"http://unsubscribe.urbanairship.com/email/success.html\"]]"
)


@pytest.fixture
def html_body() -> str:
    return HTML_BODY


@pytest.fixture
def plaintext_body() -> str:
    return PLAINTEXT_BODY


@pytest.fixture
def new_opted_in() -> datetime:
    return datetime(2018, 11, 29, 10, 34, 22)


@pytest.fixture
def ben_opted_in() -> datetime:
    return datetime(2018, 11, 29, 12, 45, 10)


@pytest.fixture
def new_channel(new_opted_in):
    return (
        EmailChannelBuilder()
        .with_address("new@email.com")
        .with_commercial_opted_in(new_opted_in)
        .build()
    )


@pytest.fixture
def ben_channel(ben_opted_in):
    return (
        EmailChannelBuilder()
        .with_address("ben@icetown.com")
        .with_transactional_opted_in(ben_opted_in)
        .build()
    )


@pytest.fixture
def audience(new_channel, ben_channel):
    channels = EmailChannelsBuilder().add_channel(new_channel).add_channel(ben_channel).build()
    return CreateAndSendAudience(channels=channels)


@pytest.fixture
def email_payload():
    return (
        CreateAndSendEmailPayloadBuilder()
        .with_subject("Welcome to the Winter Sale! ")
        .with_html_body(HTML_BODY)
        .with_plaintext_body(PLAINTEXT_BODY)
        .with_message_type(MessageType.COMMERCIAL)
        .with_sender_name("Urban Airship")
        .with_sender_address("team@urbanairship.com")
        .with_reply_to("no-reply@urbanairship.com")
        .build()
    )


@pytest.fixture
def sender_builder():
    """Email payload builder with sender fields set and no content"""

    def _make():
        return (
            CreateAndSendEmailPayloadBuilder()
            .with_message_type(MessageType.COMMERCIAL)
            .with_sender_name("Urban Airship")
            .with_sender_address("team@urbanairship.com")
            .with_reply_to("no-reply@urbanairship.com")
        )

    return _make
