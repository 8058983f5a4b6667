"""
Shared building blocks: wire model base, date formats, JSON mapper, request base
"""

from .base import WireModel, freeze, thaw
from .date_formats import DATE_FORMAT, format_datetime, parse_datetime, to_utc
from .json_mapper import parse, serialize, to_tree
from .request import ApiRequest, CONTENT_TYPE_JSON

__all__ = [
    "WireModel",
    "freeze",
    "thaw",
    "DATE_FORMAT",
    "format_datetime",
    "parse_datetime",
    "to_utc",
    "parse",
    "serialize",
    "to_tree",
    "ApiRequest",
    "CONTENT_TYPE_JSON",
]
