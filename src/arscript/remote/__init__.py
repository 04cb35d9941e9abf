"""Remote, schema-constrained alternative to the local classifier."""

from __future__ import annotations

from .client import DEFAULT_MODEL, RemoteClassifier
from .schema import ELEMENT_ARRAY_SCHEMA, ELEMENT_SCHEMA, build_messages

__all__ = [
    "DEFAULT_MODEL",
    "ELEMENT_ARRAY_SCHEMA",
    "ELEMENT_SCHEMA",
    "RemoteClassifier",
    "build_messages",
]
