"""
Root conftest.py - Global configuration for all test layers.

Test Layers:
    - unit/       : Unit tests (payload models, serialization, client with mocked transport)
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from airship_push import parse, serialize


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


@pytest.fixture
def assert_json_equal():
    """Compare a payload object's wire JSON with an expected JSON literal"""

    def _assert(obj, expected_json: str):
        actual = parse(serialize(obj))
        expected = parse(expected_json)
        assert actual == expected

    return _assert
