"""
JSON mapper

``serialize`` turns payload objects into wire JSON text and ``parse`` turns
JSON text back into a plain tree. Parsed trees compare order-insensitively
for objects and order-sensitively for arrays.
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def to_tree(obj: Any) -> Any:
    """Convert payload objects (or lists of them) to a JSON-native tree"""
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [to_tree(item) for item in obj]
    if isinstance(obj, Mapping):
        return {key: to_tree(value) for key, value in obj.items()}
    return obj


def serialize(obj: Any) -> str:
    """Wire JSON text; NaN and infinities raise ValueError"""
    return json.dumps(to_tree(obj), allow_nan=False)


def parse(text: str) -> Any:
    return json.loads(text)
