"""Pytest configuration for dataknobs_validators tests."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validators import list_, number, object_, string  # noqa: E402


@dataclass
class Address:
    """Plain object used to exercise attribute-based object validation."""

    street: str
    zip: str


@pytest.fixture
def address_type():
    return Address


@pytest.fixture
def user_validator():
    """A nested schema shared by composite tests."""
    return object_({
        "name": string().min_length(1),
        "age": number().min(0).max(150).to_integer(),
        "tags": list_(string()).optional(),
        "address": object_({
            "street": string(),
            "zip": string().min_length(5).max_length(10),
        }).optional(),
    })
