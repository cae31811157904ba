"""Test fixtures package."""

from .mock_metadata import FakeMetadataSource

__all__ = [
    "FakeMetadataSource",
]
