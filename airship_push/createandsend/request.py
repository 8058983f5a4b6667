"""
Create-and-Send Request
"""

from ..common.request import ApiRequest
from .payload import CreateAndSendPayload

CREATE_AND_SEND_PATH = "/api/create-and-send"
VALIDATE_PATH = "/api/create-and-send/validate"


class CreateAndSendRequest(ApiRequest):
    """Sends a create-and-send payload, or only validates it"""

    __slots__ = ()

    @classmethod
    def new_request(cls, payload: CreateAndSendPayload) -> "CreateAndSendRequest":
        return cls(payload, CREATE_AND_SEND_PATH)

    @classmethod
    def new_validate_request(cls, payload: CreateAndSendPayload) -> "CreateAndSendRequest":
        """Request that asks the API to validate without sending"""
        return cls(payload, VALIDATE_PATH)

    @property
    def is_validation(self) -> bool:
        return self.path == VALIDATE_PATH
