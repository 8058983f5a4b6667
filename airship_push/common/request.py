"""
API request base

A request pairs a validated payload with the endpoint that accepts it. The
transport only needs the method, the path and the body text.
"""

from typing import Any, ClassVar

from .json_mapper import serialize

CONTENT_TYPE_JSON = "application/json"


class ApiRequest:
    """Base class for requests sent by ``AirshipClient``"""

    http_method: ClassVar[str] = "POST"
    content_type: ClassVar[str] = CONTENT_TYPE_JSON

    __slots__ = ("_payload", "_path")

    def __init__(self, payload: Any, path: str):
        self._payload = payload
        self._path = path

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def path(self) -> str:
        return self._path

    def get_request_body(self) -> str:
        """JSON text sent as the request body"""
        return serialize(self._payload)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.http_method} {self._path})"
