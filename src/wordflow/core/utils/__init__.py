"""
Utils Package

Serialization helpers for payloads and reflow results.
"""

from .serialization import (
    serialize_content,
    deserialize_content,
    serialize_result,
    load_content_json,
    save_content_json,
    save_result_json,
)

__all__ = [
    "serialize_content",
    "deserialize_content",
    "serialize_result",
    "load_content_json",
    "save_content_json",
    "save_result_json",
]
