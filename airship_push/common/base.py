"""
Base wire model

Every payload object is a frozen pydantic model. Subclasses shape their own
JSON with a plain ``model_serializer`` that returns JSON-native values only,
so ``model_dump()`` is the wire tree.

``frozen=True`` only blocks attribute assignment, so map and list fields are
stored through ``freeze``: maps become read-only ``MappingProxyType`` views
and lists become tuples, all the way down. Serializers turn them back into
plain JSON containers with ``thaw``.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict


def freeze(value: Any) -> Any:
    """Read-only copy of a nested map/list structure"""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dict/list copy of a frozen structure"""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


class WireModel(BaseModel):
    """Immutable, validated payload value"""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def to_payload(self):
        """Wire JSON tree of this object"""
        return self.model_dump()
