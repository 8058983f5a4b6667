"""
airship_push

Typed payload builders and an async client for the push/email send API.

Subpackages:
- createandsend: inline email audiences, email payloads and templates
- customevents: custom event payloads
- push: device types, campaigns, notification
- common: wire model base, date formats, JSON mapper
"""

__version__ = "0.1.0"

from .common import parse, serialize

__all__ = [
    "__version__",
    "parse",
    "serialize",
]
