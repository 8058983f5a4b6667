"""
Custom Event Request

The custom events endpoint takes a JSON array of events, so a single
payload is wrapped in a one-element list.
"""

from typing import List, Sequence, Union

from ..common.request import ApiRequest
from .models import CustomEventPayload

CUSTOM_EVENTS_PATH = "/api/custom-events"
MAX_EVENTS_PER_REQUEST = 100


class CustomEventRequest(ApiRequest):
    """Reports one or more custom events"""

    __slots__ = ()

    @classmethod
    def new_request(
        cls,
        payloads: Union[CustomEventPayload, Sequence[CustomEventPayload]]
    ) -> "CustomEventRequest":
        if isinstance(payloads, CustomEventPayload):
            events: List[CustomEventPayload] = [payloads]
        else:
            events = list(payloads)

        if not events:
            raise ValueError("CustomEventRequest requires at least one event")
        if len(events) > MAX_EVENTS_PER_REQUEST:
            raise ValueError(
                f"CustomEventRequest accepts at most {MAX_EVENTS_PER_REQUEST} events, got {len(events)}"
            )
        for event in events:
            if not isinstance(event, CustomEventPayload):
                raise TypeError(f"Expected CustomEventPayload, got {type(event).__name__}")
        return cls(tuple(events), CUSTOM_EVENTS_PATH)
